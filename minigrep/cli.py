"""
Command line entry point for minigrep.

Usage:
    minigrep <query> <file_path>
    IGNORE_CASE=1 minigrep <query> <file_path>   # case-insensitive

Prints every line of the file containing the query, in order. Exits 1
with a message on stderr when arguments are missing or the file cannot
be read.
"""

import logging
import sys
from typing import Mapping, Optional, Sequence

from .core import (
    ConfigurationError,
    FileReadError,
    build,
    get_config,
    get_logger,
    ignore_case_from_env
)
from .search import LineMatcher
from .utils import get_file_size_kb, read_text_file

logger = get_logger(__name__)


def main(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None
) -> int:
    """
    Run one search and print the matching lines.

    Args:
        argv: Full argument list including the program name. Defaults to
              sys.argv.
        environ: Environment mapping. Defaults to os.environ.

    Returns:
        Process exit code: 0 on success, 1 on any error.
    """
    if argv is None:
        argv = sys.argv

    try:
        app_config = get_config()
        search_config = build(
            argv,
            ignore_case_from_env(environ, app_config.search.ignore_case_env)
        )
    except ConfigurationError as e:
        logger.debug(f"Invalid invocation: {e.message} {e.details}")
        print(f"Problem parsing arguments: {e.message}", file=sys.stderr)
        return 1

    try:
        contents = read_text_file(search_config.file_path, app_config.search.encoding)
    except FileReadError as e:
        logger.debug(f"Could not read {e.filepath}: {e.details}")
        print(f"Application error: {e.message}", file=sys.stderr)
        return 1

    if logger.isEnabledFor(logging.DEBUG):
        try:
            logger.debug(f"Read {search_config.file_path} ({get_file_size_kb(search_config.file_path)} KB)")
        except OSError as e:
            logger.debug(f"Read {search_config.file_path} (size unavailable: {e})")

    results, _stats = LineMatcher(search_config).search(contents)

    for line in results:
        print(line)

    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
