"""Inlining options and their command-line defaults."""

from dataclasses import dataclass
from functools import lru_cache
import os

from dotenv import load_dotenv

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class InlineConfig:
    """Options for one inlining call. The default enables everything."""

    # Embed fonts referenced from @font-face rules as base64 data URIs
    inline_fonts: bool = True
    # Collapse newlines into spaces so line numbers match the source when diffing
    remove_new_lines: bool = True


def env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment.

    Args:
        name: Environment variable name
        default: Value used when the variable is unset or empty

    Returns:
        The parsed flag

    Raises:
        ValueError: If the variable holds something other than a boolean word
    """
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    if raw in TRUE_VALUES:
        return True
    if raw in FALSE_VALUES:
        return False
    raise ValueError(
        f"Invalid {name}: {raw!r}. Must be one of {', '.join(TRUE_VALUES + FALSE_VALUES)}"
    )


@lru_cache()
def get_cli_defaults() -> InlineConfig:
    """Get the options the command line starts from, overridable through the environment."""
    load_dotenv()

    return InlineConfig(
        inline_fonts=env_flag("INLINE_ASSETS_EMBED_FONTS", False),
        remove_new_lines=env_flag("INLINE_ASSETS_REMOVE_NEW_LINES", True),
    )


def get_log_level() -> str:
    """Get the log level for the command line."""
    load_dotenv()
    return os.getenv("LOG_LEVEL", "WARNING")
