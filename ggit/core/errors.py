"""Exceptions and warnings raised by ggit."""


class GgitError(Exception):
    """Base exception for ggit."""

    pass


class NotARepositoryError(GgitError):
    """Raised when no .ggit directory is found in the path or its parents."""

    pass


class ObjectNotFoundError(GgitError):
    """Raised when an object is not present in the object store."""

    pass


class AmbiguousObjectError(GgitError):
    """Raised when an abbreviated id matches more than one object."""

    pass


class IntegrityError(GgitError):
    """Raised when stored bytes do not hash to the identifier they are filed under."""

    def __init__(self, expected: str, actual: str):
        super().__init__(f"Object integrity check failed: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class CorruptIndexError(GgitError):
    """Raised when an index line cannot be parsed into its four fields."""

    def __init__(self, lineno: int, line: str, reason: str):
        super().__init__(f"Corrupt index at line {lineno}: {reason}: {line!r}")
        self.lineno = lineno
        self.line = line
        self.reason = reason


class PathOutsideRepositoryError(GgitError):
    """Raised when a path is outside the working tree or inside .ggit."""

    pass


class UnsupportedPathError(GgitError):
    """Raised for a path the index line format cannot represent."""

    pass


class PathNotFoundWarning(UserWarning):
    """Issued for a path given to add that does not exist."""

    def __init__(self, path: str):
        super().__init__(f"pathspec '{path}' did not match any files")
        self.path = path
