"""Recursive stylesheet inlining.

A stylesheet is processed in three passes, always in this order:

1. block comments are stripped, so commented-out imports and urls are ignored;
2. every ``url(...)`` is rewritten relative to the root directory, since the
   CSS ends up inside the HTML document that lives there;
3. every ``@import url(...);`` is replaced by the recursively inlined content
   of the imported stylesheet.

A set of visited stylesheets is shared by the whole traversal of one
document. Reaching a stylesheet a second time, through an import cycle or a
duplicate import, yields empty content instead of an error.
"""

import logging
from pathlib import Path
import re
from typing import Set, Union

from ..exceptions import RepeatedFileError
from ..storage import read_text
from .paths import canonicalize, is_remote, relative_to_root, resolve, strip_query

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

COMMENT_PATTERN = re.compile(r"/\*[^*]*\*+(?:[^/*][^*]*\*+)*/")
URL_PATTERN = re.compile(r"""url\s*?\(\s*["']?([^"')]+?)["']?\s*\)""")
IMPORT_PATTERN = re.compile(r"""@import\s+url\(\s*["']?([^"')]+)["']?\s*\)\s*;\s*""")
# @import "file.css"; is the same statement as @import url("file.css");
STRING_IMPORT_PATTERN = re.compile(r"""@import\s+(["'])([^"']+)\1""")

# Characters that may not appear in an unquoted url()
UNSAFE_URL_CHARACTERS = re.compile(r"""[\s"'()\\]""")

# Probably not a path if longer than this
MAX_REFERENCE_LENGTH = 1500


def strip_comments(css: str) -> str:
    """Remove every ``/* ... */`` block comment."""
    return COMMENT_PATTERN.sub("", css)


def normalize_imports(css: str) -> str:
    """Rewrite ``@import "x.css"`` to ``@import url(x.css)``."""
    return STRING_IMPORT_PATTERN.sub(lambda m: f"@import url({m.group(2)})", css)


def should_rewrite(reference: str) -> bool:
    """Check whether a url() argument is a local path that needs rewriting."""
    if len(reference) > MAX_REFERENCE_LENGTH:
        return False
    return not (is_remote(reference) or reference.startswith(("data:", "#")))


def css_url(path: str) -> str:
    """Write a url() value, quoting it when it holds whitespace, quotes or parentheses."""
    if not UNSAFE_URL_CHARACTERS.search(path):
        return f"url({path})"
    escaped = path.replace("\\", "\\\\").replace('"', '\\"')
    return f'url("{escaped}")'


def rewrite_urls(css: str, css_dir: PathLike, root: PathLike) -> str:
    """
    Make every local url() in a stylesheet relative to the root directory.

    Args:
        css: Stylesheet text
        css_dir: Directory of the stylesheet, which its urls are relative to
        root: Directory the urls should be relative to afterwards

    Returns:
        The stylesheet with local urls rewritten
    """

    def replace_url(match: re.Match) -> str:
        reference = match.group(1).strip()
        if not should_rewrite(reference):
            return match.group(0)

        target = resolve(reference, css_dir, must_exist=False).path
        return css_url(relative_to_root(target, root))

    return URL_PATTERN.sub(replace_url, css)


def expand_imports(css: str, root: PathLike, visited: Set[Path]) -> str:
    """
    Replace each ``@import url(...);`` with the inlined content it points to.

    The urls must already be relative to root.
    """

    def replace_import(match: re.Match) -> str:
        reference = match.group(1).strip()
        if is_remote(reference) or reference.startswith("data:"):
            return match.group(0)

        try:
            return inline_css(Path(root) / strip_query(reference), root, visited)
        except RepeatedFileError as e:
            logger.debug(f"Skipped repeated import: {e.path}")
            return ""

    return IMPORT_PATTERN.sub(replace_import, css)


def inline_css(css_path: PathLike, root: PathLike, visited: Set[Path]) -> str:
    """
    Inline a stylesheet and everything it imports.

    Args:
        css_path: Path of the stylesheet
        root: Directory every url() in the result is made relative to
        visited: Stylesheets already inlined during this traversal, updated in place

    Returns:
        The expanded stylesheet

    Raises:
        RepeatedFileError: If css_path was already inlined during this traversal
        InvalidPathError: If this stylesheet or one it imports does not exist
        FileReadError: If this stylesheet or one it imports cannot be read
    """
    css_path = canonicalize(css_path)
    if css_path in visited:
        raise RepeatedFileError(css_path)
    visited.add(css_path)

    css = read_text(css_path)
    css = strip_comments(css)
    css = normalize_imports(css)
    css = rewrite_urls(css, css_path.parent, root)
    css = expand_imports(css, root, visited)

    logger.debug(f"Inlined stylesheet: {css_path}")
    return css
