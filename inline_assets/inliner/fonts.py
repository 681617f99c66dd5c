"""Embedding of @font-face font files as base64 data URIs."""

import base64
import logging
from pathlib import Path
import re
from typing import Union

from ..storage import read_bytes
from .paths import is_remote, resolve, strip_query

logger = logging.getLogger(__name__)

FONT_MIME_TYPES = {
    ".woff": "application/font-woff",
    ".woff2": "application/font-woff2",
    ".otf": "font/opentype",
    ".ttf": "application/font-ttf",
}
DEFAULT_FONT_MIME_TYPE = "application/font-ttf"

FONT_FACE_PATTERN = re.compile(r"@font-face\s*\{[^}]*\}", re.IGNORECASE)
SRC_DECLARATION_PATTERN = re.compile(r"(?<![\w-])src\s*:(?:[^;}(]|\([^)]*\))*", re.IGNORECASE)
URL_PATTERN = re.compile(r"""url\s*\(\s*(["']?)([^"')]+?)\1\s*\)""", re.IGNORECASE)


def font_mime_type(font_path: Union[str, Path]) -> str:
    """Determine a font's MIME type from its extension, falling back to TrueType."""
    return FONT_MIME_TYPES.get(Path(font_path).suffix.lower(), DEFAULT_FONT_MIME_TYPE)


def embed(font_path: Union[str, Path]) -> str:
    """
    Read a font file and encode it as a CSS url() holding a data URI.

    Args:
        font_path: Path of the font file

    Returns:
        ``url(data:<mime>;charset=utf-8;base64,<data>)``

    Raises:
        InvalidPathError: If the font does not exist
        FileReadError: If the font cannot be read
    """
    font_data = read_bytes(font_path)
    font_b64 = base64.b64encode(font_data).decode("ascii")
    mime_type = font_mime_type(font_path)

    logger.debug(f"Embedded font: {font_path} ({len(font_data) / 1024:.0f} KB)")
    return f"url(data:{mime_type};charset=utf-8;base64,{font_b64})"


def embed_fonts(css: str, root: Union[str, Path]) -> str:
    """
    Replace local url() references in the src of every @font-face rule with data URIs.

    Args:
        css: Stylesheet whose url() values are already relative to root
        root: Directory those url() values are resolved against

    Returns:
        The stylesheet with fonts embedded
    """

    def replace_url(match: re.Match) -> str:
        reference = match.group(2).strip()
        if is_remote(reference) or reference.startswith(("data:", "#")):
            return match.group(0)

        font_path = resolve(strip_query(reference), root).path
        return embed(font_path)

    def replace_src(match: re.Match) -> str:
        return URL_PATTERN.sub(replace_url, match.group(0))

    def replace_font_face(match: re.Match) -> str:
        return SRC_DECLARATION_PATTERN.sub(replace_src, match.group(0))

    return FONT_FACE_PATTERN.sub(replace_font_face, css)
