"""Inlining of stylesheets, scripts and fonts into HTML documents."""

from .css import inline_css
from .fonts import embed, embed_fonts
from .html import HtmlInliner, inline_file, inline_html_string
from .paths import ResolvedRef, resolve

__all__ = [
    "HtmlInliner",
    "ResolvedRef",
    "embed",
    "embed_fonts",
    "inline_css",
    "inline_file",
    "inline_html_string",
    "resolve",
]
