"""Tests for @font-face font embedding."""

import base64
import re

import pytest

from inline_assets.exceptions import InvalidPathError
from inline_assets.inliner.fonts import embed, embed_fonts, font_mime_type

FONT_BYTES = b"wOFF\x00\x01\x00\x00\xff\xfe font data"


def decode_data_uri(css, mime_type):
    match = re.search(
        rf"url\(data:{re.escape(mime_type)};charset=utf-8;base64,([A-Za-z0-9+/=]+)\)", css
    )
    assert match, css
    return base64.b64decode(match.group(1))


@pytest.mark.parametrize(
    "filename, mime_type",
    [
        ("f.woff", "application/font-woff"),
        ("f.woff2", "application/font-woff2"),
        ("f.otf", "font/opentype"),
        ("f.ttf", "application/font-ttf"),
        ("F.WOFF", "application/font-woff"),
        ("f.eot", "application/font-ttf"),
        ("font", "application/font-ttf"),
    ],
)
def test_font_mime_type(filename, mime_type):
    assert font_mime_type(filename) == mime_type


def test_embed_round_trip(site):
    font = site("fonts/f.woff", FONT_BYTES)

    fragment = embed(font)

    assert fragment.startswith("url(data:application/font-woff;charset=utf-8;base64,")
    assert decode_data_uri(fragment, "application/font-woff") == FONT_BYTES


def test_embed_missing_font(tmp_path):
    with pytest.raises(InvalidPathError):
        embed(tmp_path / "missing.woff")


class TestEmbedFonts:
    """Test rewriting of @font-face rules."""

    def test_font_face_src_is_embedded(self, site):
        site("fonts/f.woff", FONT_BYTES)
        css = '@font-face{font-family:F;src:url(fonts/f.woff) format("woff");}'

        result = embed_fonts(css, site.root)

        assert "fonts/f.woff" not in result
        assert result.startswith("@font-face{font-family:F;src:url(data:")
        assert result.endswith(') format("woff");}')
        assert decode_data_uri(result, "application/font-woff") == FONT_BYTES

    def test_every_source_is_embedded(self, site):
        site("fonts/f.woff2", b"woff2")
        site("fonts/f.ttf", b"ttf")
        css = (
            "@font-face {\n"
            "  font-family: F;\n"
            "  src: url('fonts/f.woff2') format('woff2'),\n"
            '       url("fonts/f.ttf") format("truetype");\n'
            "}"
        )

        result = embed_fonts(css, site.root)

        assert decode_data_uri(result, "application/font-woff2") == b"woff2"
        assert decode_data_uri(result, "application/font-ttf") == b"ttf"
        assert "format('woff2')" in result
        assert 'format("truetype")' in result

    def test_query_and_fragment_are_ignored(self, site):
        site("fonts/f.ttf", b"ttf")
        css = "@font-face{src:url(fonts/f.ttf?#iefix) format('truetype')}"

        result = embed_fonts(css, site.root)

        assert decode_data_uri(result, "application/font-ttf") == b"ttf"

    def test_urls_outside_font_face_are_untouched(self, site):
        site("fonts/f.woff", FONT_BYTES)
        css = "body{background:url(fonts/f.woff)}"

        assert embed_fonts(css, site.root) == css

    def test_urls_outside_src_are_untouched(self, site):
        css = "@font-face{font-family:F;unicode-range:U+0000-00FF;x-src-note:url(n.woff)}"

        assert embed_fonts(css, site.root) == css

    def test_remote_and_data_sources_are_untouched(self, site):
        css = (
            "@font-face{src:url(https://fonts.example.com/f.woff2),"
            "url(data:font/woff2;base64,AAAA)}"
        )

        assert embed_fonts(css, site.root) == css

    def test_missing_font_raises(self, site):
        css = "@font-face{src:url(fonts/missing.woff)}"

        with pytest.raises(InvalidPathError):
            embed_fonts(css, site.root)
