import os
from pathlib import Path
import sys

import pytest

# Add the project root to the path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from inline_assets.config import get_cli_defaults


@pytest.fixture
def site(tmp_path):
    """Create files under a temporary root directory.

    Returns a callable ``write(relative_path, content)``; ``write.root`` is the
    canonical root directory.
    """
    root = tmp_path.resolve()

    def write(relative_path: str, content="") -> Path:
        path = root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8", newline="")
        return path

    write.root = root
    return write


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate tests from inline-assets settings in the environment."""
    for name in ("INLINE_ASSETS_EMBED_FONTS", "INLINE_ASSETS_REMOVE_NEW_LINES", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_cli_defaults.cache_clear()
    yield
    get_cli_defaults.cache_clear()
