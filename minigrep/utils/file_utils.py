"""
File utility functions for minigrep.

Provides whole-file reading of the document to search and size
calculations for diagnostics.
"""

from pathlib import Path
from typing import Union

from ..core.exceptions import FileReadError


def read_text_file(filepath: Union[str, Path], encoding: str = "utf-8") -> str:
    """
    Read a whole text file into a string.

    Line terminators are left untouched so "\\r\\n" survives for
    split_lines() to handle.

    Args:
        filepath: Path to the file.
        encoding: Text encoding of the file.

    Returns:
        Full file contents.

    Raises:
        FileReadError: If the file is missing, unreadable, or not valid text.
    """
    filepath = Path(filepath)

    try:
        with open(filepath, "r", encoding=encoding, newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileReadError(
            f"{filepath} is not valid {encoding} text: {e.reason}",
            filepath=str(filepath),
            details={"encoding": encoding, "position": e.start}
        ) from e
    except LookupError as e:
        raise FileReadError(
            f"Unknown encoding: {encoding}",
            filepath=str(filepath),
            details={"encoding": encoding}
        ) from e
    except OSError as e:
        raise FileReadError(
            f"{e.strerror or e} ({filepath})",
            filepath=str(filepath),
            details={"errno": e.errno}
        ) from e


def get_file_size_kb(filepath: Union[str, Path]) -> float:
    """
    Get file size in kilobytes.

    Args:
        filepath: Path to the file.

    Returns:
        File size in KB, rounded to 2 decimal places.
    """
    filepath = Path(filepath)
    size_bytes = filepath.stat().st_size
    return round(size_bytes / 1024, 2)


if __name__ == "__main__":
    import tempfile

    with tempfile.NamedTemporaryFile(delete=False, suffix=".txt") as f:
        f.write(b"first line\r\nsecond line\n")
        temp_path = Path(f.name)

    print(f"Test file: {temp_path}")
    print(f"Contents: {read_text_file(temp_path)!r}")
    print(f"Size: {get_file_size_kb(temp_path)} KB")

    temp_path.unlink()
