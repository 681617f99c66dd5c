"""Bundle the stylesheets, scripts and fonts of an HTML file into one self-contained document."""

from .config import InlineConfig
from .exceptions import FileReadError, InlineError, InvalidPathError, RepeatedFileError
from .inliner import inline_file, inline_html_string

__version__ = "0.1.0"

__all__ = [
    "FileReadError",
    "InlineConfig",
    "InlineError",
    "InvalidPathError",
    "RepeatedFileError",
    "inline_file",
    "inline_html_string",
]
