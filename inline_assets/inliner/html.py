"""Inlining of the stylesheets and scripts an HTML document links to."""

import logging
from pathlib import Path
import re
from typing import List, Optional, Set, Union

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.element import Doctype, Script, Stylesheet, Tag
from bs4.formatter import HTMLFormatter

from ..config import InlineConfig
from ..exceptions import RepeatedFileError
from ..storage import normalize_line_endings, read_text
from .css import inline_css
from .fonts import embed_fonts
from .paths import canonicalize, is_remote, resolve, strip_query

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# An ampersand that would otherwise be read back as a character reference
REFERENCE_AMPERSAND = re.compile(r"&(?=#?[0-9A-Za-z]+;)")


class SourceFormatter(HTMLFormatter):
    """Writes elements the way they were written in the source document.

    Attributes keep their order, void elements are not closed with ``/>`` and
    ampersands in attribute values are only escaped when they would start a
    character reference.
    """

    def __init__(self):
        super().__init__(
            entity_substitution=EntitySubstitution.substitute_xml,
            void_element_close_prefix=None,
            empty_attributes_are_booleans=True,
        )

    def attributes(self, tag: Tag):
        if tag.attrs is None:
            return []
        return [
            (key, None if self.empty_attributes_are_booleans and value == "" else value)
            for key, value in tag.attrs.items()
        ]

    def attribute_value(self, value: str) -> str:
        return REFERENCE_AMPERSAND.sub("&amp;", value)


class SourceDoctype(Doctype):
    """A doctype written without the newline bs4 appends after it."""

    SUFFIX = ">"


def serialize(soup: BeautifulSoup) -> str:
    """Turn the tree back into text, leaving untouched markup as it was parsed."""
    for node in list(soup.contents):
        if isinstance(node, Doctype) and not isinstance(node, SourceDoctype):
            node.replace_with(SourceDoctype(str(node)))
    return soup.decode(formatter=SourceFormatter())


class HtmlInliner:
    """Replaces linked stylesheets and scripts with inline <style> and <script> elements."""

    def __init__(self, root: PathLike, config: Optional[InlineConfig] = None):
        self.root = canonicalize(root)
        self.config = config or InlineConfig()

    def inline(self, html: str) -> str:
        """
        Inline every local stylesheet and script of a document.

        Args:
            html: The HTML document

        Returns:
            The serialized document with its assets inlined

        Raises:
            InvalidPathError: If a referenced file does not exist
            FileReadError: If a referenced file cannot be read
        """
        # Attribute values stay plain strings so they are written back unchanged
        soup = BeautifulSoup(html, "html.parser", multi_valued_attributes=None)
        # Stylesheets already inlined anywhere in this document
        visited: Set[Path] = set()

        # Collect first, the loop below replaces and removes elements
        elements: List[Tag] = soup.find_all(["link", "script"])

        styles = scripts = dropped = 0
        for element in elements:
            if element.name == "link" and self._is_local_stylesheet(element):
                if self._inline_stylesheet(soup, element, visited):
                    styles += 1
                else:
                    dropped += 1
            elif element.name == "script" and self._is_local_script(element):
                self._inline_script(element)
                scripts += 1

        logger.info(
            f"Inlined {styles} stylesheet(s) and {scripts} script(s), "
            f"dropped {dropped} repeated stylesheet(s)"
        )

        output = normalize_line_endings(serialize(soup))
        if self.config.remove_new_lines:
            output = output.replace("\n", " ")
        return output

    @staticmethod
    def _is_local(reference: Optional[str]) -> bool:
        return bool(reference) and not (is_remote(reference) or reference.startswith("data:"))

    def _is_local_stylesheet(self, element: Tag) -> bool:
        rel = (element.get("rel") or "").lower().split()
        # Alternate stylesheets are disabled until the reader picks them
        if "stylesheet" not in rel or "alternate" in rel:
            return False
        return self._is_local(element.get("href"))

    def _is_local_script(self, element: Tag) -> bool:
        return self._is_local(element.get("src"))

    def _inline_stylesheet(self, soup: BeautifulSoup, link: Tag, visited: Set[Path]) -> bool:
        """Replace a <link> with a <style>. Returns False if the link was dropped as a repeat."""
        href = link["href"]
        try:
            css = inline_css(self.root / strip_query(href), self.root, visited)
        except RepeatedFileError:
            logger.debug(f"Dropped repeated stylesheet: {href}")
            link.decompose()
            return False

        if self.config.inline_fonts:
            css = embed_fonts(css, self.root)

        style = soup.new_tag("style")
        if link.get("media"):
            style["media"] = link["media"]
        style.append(Stylesheet(css))
        link.replace_with(style)
        logger.debug(f"Inlined stylesheet link: {href}")
        return True

    def _inline_script(self, script: Tag) -> None:
        src = script["src"]
        script_path = resolve(strip_query(src), self.root).path
        content = read_text(script_path, src)

        del script["src"]
        script.clear()
        script.append(Script(content))
        logger.debug(f"Inlined script: {src}")


def inline_html_string(
    html: str, root_path: PathLike, config: Optional[InlineConfig] = None
) -> str:
    """
    Inline the assets linked from an HTML string.

    Args:
        html: The HTML document
        root_path: Directory relative paths in the document are resolved against,
            usually the directory the document lives in
        config: Features to enable, everything when omitted

    Returns:
        The document with its stylesheets, scripts and optionally fonts inlined
    """
    return HtmlInliner(root_path, config).inline(html)


def inline_file(file_path: PathLike, config: Optional[InlineConfig] = None) -> str:
    """
    Inline the assets of an HTML file, resolving paths against its directory.

    Args:
        file_path: Path of the HTML file
        config: Features to enable, everything when omitted

    Returns:
        The document with its assets inlined
    """
    file_path = Path(file_path)
    html = read_text(file_path)
    return inline_html_string(html, file_path.parent, config)
