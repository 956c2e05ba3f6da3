"""
Line matcher for literal substring search.

Scans a document line by line and keeps the lines containing a query,
either case-sensitively or after lowercasing both sides. Matching lines
are always returned with their original text.
"""

import time
from typing import List, Tuple

from ..core import SearchConfig, get_logger
from ..utils.text_utils import fold_case, split_lines
from .models import SearchStats

logger = get_logger(__name__)


def search(query: str, contents: str) -> List[str]:
    """
    Return the lines of contents that contain query, case-sensitively.

    An empty query matches every line; empty contents yield no lines.
    """
    return [line for line in split_lines(contents) if query in line]


def search_case_insensitive(query: str, contents: str) -> List[str]:
    """
    Return the lines of contents that contain query, ignoring case.

    Both sides are lowercased for the comparison only; the returned lines
    keep their original casing.
    """
    query = fold_case(query)
    return [line for line in split_lines(contents) if query in fold_case(line)]


class LineMatcher:
    """
    Runs one search described by a SearchConfig.

    Selects the case-sensitive or case-insensitive strategy and reports
    timing statistics alongside the matches.
    """

    def __init__(self, config: SearchConfig):
        self.config = config

    def search(self, contents: str) -> Tuple[List[str], SearchStats]:
        """
        Search a document.

        Args:
            contents: Full text of the document.

        Returns:
            Tuple of (matching lines, SearchStats).
        """
        start_time = time.time()

        if self.config.ignore_case:
            results = search_case_insensitive(self.config.query, contents)
        else:
            results = search(self.config.query, contents)

        execution_time = (time.time() - start_time) * 1000

        stats = SearchStats(
            query=self.config.query,
            ignore_case=self.config.ignore_case,
            total_lines=len(split_lines(contents)),
            matched_lines=len(results),
            execution_time_ms=round(execution_time, 2)
        )

        logger.debug(
            f"Search '{self.config.query}' (ignore_case={self.config.ignore_case}): "
            f"{stats.matched_lines}/{stats.total_lines} lines in {execution_time:.1f}ms"
        )

        return results, stats


if __name__ == "__main__":
    contents = """\
Rust:
safe, fast, productive.
Pick three.
Duct tape."""

    print(search("duct", contents))
    print(search_case_insensitive("duct", contents))

    matcher = LineMatcher(SearchConfig(query="rUsT", file_path="-", ignore_case=True))
    lines, stats = matcher.search(contents)
    print(lines, stats)
