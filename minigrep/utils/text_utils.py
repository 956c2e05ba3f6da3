"""
Text utility functions for minigrep.

Provides line splitting and case folding for the line matcher.
"""

from typing import List


def split_lines(contents: str) -> List[str]:
    """
    Split text into lines on "\\n" and "\\r\\n" boundaries.

    A final unterminated line is kept, a trailing terminator does not
    produce an empty last line, and a lone "\\r" stays part of its line.
    Unlike str.splitlines(), no other characters end a line.

    Args:
        contents: Full document text.

    Returns:
        Lines without their terminators, in document order.
    """
    if not contents:
        return []

    lines = contents.split("\n")

    # text after the last "\n" is unterminated, so its CR is not a boundary
    tail = lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]

    if tail:
        lines.append(tail)

    return lines


def fold_case(text: str) -> str:
    """Lowercase text for case-insensitive comparison."""
    return text.lower()


if __name__ == "__main__":
    print("=== split_lines ===")
    print(split_lines("a\nb\nc"))
    print(split_lines("a\r\nb\n"))
    print(split_lines(""))

    print("\n=== fold_case ===")
    print(fold_case("Duct Tape"))
