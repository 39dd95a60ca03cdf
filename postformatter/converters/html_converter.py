"""
HTML-to-Markdown Converter

Converts sanitized rich-editor HTML into the Markdown dialect of the
Markdown editor. The Markdown side has no underline and only three heading
levels, so <u> is unwrapped and <h4>-<h6> become ### headings.

Text that would read as Markdown or HTML is backslash-escaped, so a literal
"# not a heading" or "<b>" typed in the rich editor stays text after a
round trip through the Markdown editor.
"""

import logging
import re

from bs4 import BeautifulSoup, NavigableString, Tag
from markdownify import MarkdownConverter

from ..formats import ALLOWED_TAGS, SourceFormat, TargetFormat
from .sanitizer import HtmlSanitizer

logger = logging.getLogger(__name__)

# Tag renames applied before markdownify sees the tree
TAG_RENAMES = {
    "h4": "h3",
    "h5": "h3",
    "h6": "h3",
    "s": "del",
    "strike": "del",
}

UNWRAPPED_TAGS = ("u",)

MARKDOWNIFY_OPTIONS = dict(
    heading_style="ATX",
    bullets="-",
    strong_em_symbol="*",
    autolinks=False,
    escape_misc=True,
    convert=sorted(ALLOWED_TAGS),
)

# python-markdown nests list content at one tab stop
LIST_INDENT = " " * 4

_EXCESS_NEWLINES = re.compile(r"\n{3,}")
_BULLET = re.compile(r"(?:[-*+]|\d+\.) ")


class PostMarkdownConverter(MarkdownConverter):
    """
    markdownify converter tuned for python-markdown with nl2br.

    Nested list content is indented by four spaces instead of the bullet
    width, and a <br> next to another <br> is written as inline HTML since
    blank lines would end the paragraph.
    """

    def convert_li(self, el, text, *args, **kwargs):
        item = super().convert_li(el, text, *args, **kwargs)
        bullet = _BULLET.match(item)
        if bullet is None:
            return item

        old_indent = " " * bullet.end()
        lines = item.split("\n")
        lines[1:] = [
            LIST_INDENT + line[len(old_indent):] if line.startswith(old_indent) else line
            for line in lines[1:]
        ]
        return "\n".join(lines)

    def convert_br(self, el, text, *args, **kwargs):
        converted = super().convert_br(el, text, *args, **kwargs)
        if "\n" in converted and _next_to_break(el):
            return "<br>" + (text or "")
        return converted


class HtmlToMarkdownConverter:
    """Converts structured markup to lightweight markup."""

    SOURCE = SourceFormat.HTML
    TARGET = TargetFormat.MARKDOWN

    def __init__(self, sanitizer: HtmlSanitizer = None):
        self.sanitizer = sanitizer or HtmlSanitizer()

    @classmethod
    def can_handle(cls, source: SourceFormat, target: TargetFormat) -> bool:
        return source is cls.SOURCE and target is cls.TARGET

    def convert(self, html: str) -> str:
        """
        Convert HTML to Markdown.

        Never raises: if conversion fails the error is logged and the
        original HTML is returned unchanged.
        """
        if not html or not html.strip():
            return ""

        try:
            sanitized = self.sanitizer.sanitize(html)
            normalized = _normalize_tree(sanitized)
            md_text = PostMarkdownConverter(**MARKDOWNIFY_OPTIONS).convert(normalized)
        except Exception:
            logger.error("Error converting HTML to Markdown", exc_info=True)
            return html

        return _postprocess(md_text)


def _next_to_break(el: Tag) -> bool:
    """True if a sibling <br> touches this one, ignoring whitespace."""
    for direction in ("previous_sibling", "next_sibling"):
        sibling = getattr(el, direction)
        while isinstance(sibling, NavigableString) and not sibling.strip():
            sibling = getattr(sibling, direction)
        if isinstance(sibling, Tag) and sibling.name == "br":
            return True
    return False


def _normalize_tree(html: str) -> str:
    """Map tags without a Markdown form onto ones that have one."""
    soup = BeautifulSoup(html, "html.parser")

    for tag in soup.find_all(list(TAG_RENAMES)):
        tag.name = TAG_RENAMES[tag.name]

    for tag in soup.find_all(list(UNWRAPPED_TAGS)):
        tag.unwrap()

    return str(soup)


def _postprocess(md_text: str) -> str:
    """Collapse blank-line runs and end with a single newline."""
    md_text = _EXCESS_NEWLINES.sub("\n\n", md_text).strip()
    return md_text + "\n" if md_text else ""


def html_to_markdown(html: str) -> str:
    return HtmlToMarkdownConverter().convert(html)
