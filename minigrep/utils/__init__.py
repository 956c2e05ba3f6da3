"""
Utility module providing shared helper functions.

Contains file reading and text processing utilities used across
the application. Depends only on the core module.
"""

from .file_utils import (
    read_text_file,
    get_file_size_kb
)
from .text_utils import (
    split_lines,
    fold_case
)

__all__ = [
    "read_text_file",
    "get_file_size_kb",
    "split_lines",
    "fold_case"
]
