"""
Exceptions raised by fuzzyfind.

Only UserInputError (and its subclass RootNotReadable) ever reaches the
command line. The others are caught where they originate and logged.
"""


class FuzzyFindError(Exception):
    """Base class for all fuzzyfind errors."""
    pass


class UserInputError(FuzzyFindError):
    """Raised before traversal when the search input cannot be used."""
    pass


class RootNotReadable(UserInputError):
    """Raised when the search root is missing or not a directory."""
    pass


class IgnoreFileNotFound(FuzzyFindError):
    """Raised when a directory has no ignore file. Expected, not a failure."""
    pass


class IgnoreFileUnreadable(FuzzyFindError):
    """Raised when an ignore file exists but cannot be read."""
    pass


class MalformedPatternError(FuzzyFindError, ValueError):
    """Raised when a single ignore pattern line cannot be compiled."""

    def __init__(self, pattern: str, message: str):
        super().__init__(f"Invalid pattern '{pattern}': {message}")
        self.pattern = pattern


class InvalidPathEncoding(FuzzyFindError):
    """Raised when a directory entry name cannot be represented as text."""
    pass
