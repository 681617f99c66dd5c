"""Resolution of href/src/url() references against a base directory."""

from dataclasses import dataclass
import os
from pathlib import Path
import re
from typing import Optional, Union

from ..exceptions import from_os_error

PathLike = Union[str, Path]


@dataclass(frozen=True)
class ResolvedRef:
    """A reference and the local file it points to (None for remote references)."""

    reference: str
    path: Optional[Path] = None

    @property
    def is_remote(self) -> bool:
        return self.path is None


def is_remote(reference: str) -> bool:
    """Check whether a reference points to the network rather than the filesystem."""
    return "://" in reference or reference.startswith("//")


def canonicalize(path: PathLike, reference: Optional[str] = None) -> Path:
    """
    Return the absolute path with symlinks and ``..`` resolved.

    Raises:
        InvalidPathError: If the path does not exist
        FileReadError: On any other filesystem failure
    """
    try:
        return Path(path).resolve(strict=True)
    except OSError as e:
        raise from_os_error(e, reference if reference is not None else str(path)) from e


def resolve(reference: str, base_dir: PathLike, must_exist: bool = True) -> ResolvedRef:
    """
    Resolve a reference relative to a directory.

    Args:
        reference: An href, src or url() argument
        base_dir: Directory relative references are joined onto
        must_exist: Canonicalize against the filesystem; otherwise only
            normalize the path lexically

    Returns:
        ResolvedRef, with no path when the reference is remote
    """
    if is_remote(reference):
        return ResolvedRef(reference)

    # An absolute reference replaces base_dir entirely
    joined = Path(base_dir) / reference
    if must_exist:
        return ResolvedRef(reference, canonicalize(joined, reference))
    return ResolvedRef(reference, Path(os.path.normpath(joined)))


def relative_to_root(path: PathLike, root: PathLike) -> str:
    """Express path relative to root with forward slashes, as CSS expects."""
    return os.path.relpath(path, root).replace(os.sep, "/").replace("\\", "/")


def strip_query(reference: str) -> str:
    """Drop the query string and fragment, e.g. ``font.eot?#iefix`` -> ``font.eot``."""
    return re.split(r"[?#]", reference, maxsplit=1)[0]
