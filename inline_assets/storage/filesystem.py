"""File reading utilities that report failures as inlining errors."""

from pathlib import Path
from typing import Optional, Union

from ..exceptions import FileReadError, from_os_error

PathLike = Union[str, Path]


def read_text(path: PathLike, reference: Optional[str] = None) -> str:
    """
    Read a UTF-8 text file.

    Args:
        path: File to read
        reference: Text reported in errors, defaults to the path itself

    Returns:
        The file content

    Raises:
        InvalidPathError: If the file does not exist
        FileReadError: On any other I/O or decoding failure
    """
    reference = reference if reference is not None else str(path)
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileReadError(reference, e) from e
    except OSError as e:
        raise from_os_error(e, reference) from e


def read_bytes(path: PathLike, reference: Optional[str] = None) -> bytes:
    """
    Read a binary file.

    Args:
        path: File to read
        reference: Text reported in errors, defaults to the path itself

    Returns:
        The raw file content
    """
    reference = reference if reference is not None else str(path)
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise from_os_error(e, reference) from e


def normalize_line_endings(content: str) -> str:
    """
    Normalize all line endings to Unix format (LF only).

    Converts CRLF (\r\n) and CR (\r) to LF (\n).

    Args:
        content: String content with potentially mixed line endings

    Returns:
        String with normalized Unix line endings
    """
    # First replace CRLF with LF, then replace any remaining CR with LF
    return content.replace("\r\n", "\n").replace("\r", "\n")
