"""Errors raised while inlining the assets of an HTML document."""

from pathlib import Path
from typing import Optional, Union


class InlineError(Exception):
    """Base class for every inlining failure."""

    def __init__(self, reference: str, message: Optional[str] = None):
        self.reference = reference
        super().__init__(message or reference)


class InvalidPathError(InlineError):
    """A referenced file does not exist."""

    def __init__(self, reference: str):
        super().__init__(reference, f"Invalid path: File not found: {reference}")


class FileReadError(InlineError):
    """A referenced file exists but could not be read or decoded."""

    def __init__(self, reference: str, cause: Exception):
        self.cause = cause
        super().__init__(reference, f"Cause: {reference}, File read error: {cause}")


class RepeatedFileError(InlineError):
    """A stylesheet is reached twice, either imported twice or through an import cycle.

    Recoverable: the repeated occurrence is replaced by empty content.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(
            str(path),
            f"A file is imported twice, or there is a circular dependency: {path}",
        )


def from_os_error(error: OSError, reference: str) -> InlineError:
    """Map an OSError to InvalidPathError when the file is missing, FileReadError otherwise."""
    if isinstance(error, FileNotFoundError):
        return InvalidPathError(reference)
    return FileReadError(reference, error)
