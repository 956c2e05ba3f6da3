"""
Custom exception hierarchy for minigrep.

Provides specific exception types for the two failure modes surfaced
to the user: invalid invocation/configuration and unreadable documents.
"""


class MinigrepError(Exception):
    """Base exception for all minigrep errors."""

    def __init__(self, message: str, details: dict = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(MinigrepError):
    """Raised when configuration or command line arguments are invalid."""
    pass


class InsufficientArgumentsError(ConfigurationError):
    """Raised when fewer than query and file path are supplied."""

    def __init__(self, message: str = "not enough arguments", details: dict = None):
        super().__init__(message, details)


class FileReadError(MinigrepError):
    """Raised when the document to search cannot be read."""

    def __init__(self, message: str, filepath: str = None, details: dict = None):
        """
        Initialize file read error.

        Args:
            message: Error description.
            filepath: Path to the file that could not be read.
            details: Additional context.
        """
        super().__init__(message, details)
        self.filepath = filepath


if __name__ == "__main__":
    try:
        raise InsufficientArgumentsError(details={"received": 1})
    except MinigrepError as e:
        print(f"Caught: {e.__class__.__name__}: {e.message}")
        print(f"Details: {e.details}")

    try:
        raise FileReadError("No such file or directory", filepath="poem.txt")
    except FileReadError as e:
        print(f"Read failed for: {e.filepath}")
