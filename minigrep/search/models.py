"""
Data models for search functionality.

Defines the statistics record produced alongside search results.
"""

from dataclasses import dataclass


@dataclass
class SearchStats:
    """
    Statistics about a search execution.

    Attributes:
        query: The original query text.
        ignore_case: Whether case was ignored.
        total_lines: Number of lines scanned.
        matched_lines: Number of lines returned.
        execution_time_ms: Scan time in milliseconds.
    """
    query: str
    ignore_case: bool
    total_lines: int
    matched_lines: int
    execution_time_ms: float

    @property
    def match_ratio(self) -> float:
        """Fraction of scanned lines that matched, 0.0 for an empty document."""
        if self.total_lines == 0:
            return 0.0
        return self.matched_lines / self.total_lines


if __name__ == "__main__":
    stats = SearchStats(
        query="duct",
        ignore_case=True,
        total_lines=4,
        matched_lines=2,
        execution_time_ms=0.02
    )
    print(f"Stats: {stats.matched_lines}/{stats.total_lines} lines in {stats.execution_time_ms}ms")
    print(f"Match ratio: {stats.match_ratio:.0%}")
