"""
minigrep package.

A minimal line-oriented text search utility: prints every line of a file
containing a query, optionally ignoring case.
"""

__version__ = "1.0.0"
