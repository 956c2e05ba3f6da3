"""
Search module for literal line matching.

Provides the case-sensitive and case-insensitive line matchers and the
statistics model reported with each search.
"""

from .models import SearchStats
from .line_matcher import LineMatcher, search, search_case_insensitive

__all__ = [
    "SearchStats",
    "LineMatcher",
    "search",
    "search_case_insensitive"
]
