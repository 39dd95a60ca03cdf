"""
Plain-Text Projector

Strips all markup and returns the bare text used for character counting
and the text/plain clipboard shadow. Both editing surfaces go through the
same tree walk, so a post has the same length whichever editor wrote it.
"""

import re

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from ..formats import BLOCK_TAGS, SourceFormat, TargetFormat
from .markdown_converter import MarkdownToHtmlConverter
from .sanitizer import HtmlSanitizer

# HTML collapsible whitespace; U+00A0 is not part of it
_WHITESPACE = re.compile(r"[ \t\n\r\f]+")


class _LineBuffer:
    """Accumulates text, keeping line starts and ends free of spaces."""

    def __init__(self):
        self.parts: list[str] = []

    def at_line_start(self) -> bool:
        return not self.parts or self.parts[-1].endswith("\n")

    def add_text(self, text: str) -> None:
        if self.at_line_start():
            text = text.lstrip(" ")
        if text:
            self.parts.append(text)

    def add_raw(self, text: str) -> None:
        if text:
            self.parts.append(text)

    def line_break(self) -> None:
        while self.parts:
            stripped = self.parts[-1].rstrip(" ")
            if stripped:
                self.parts[-1] = stripped
                break
            self.parts.pop()
        self.parts.append("\n")

    def end_block(self) -> None:
        if not self.at_line_start():
            self.line_break()

    def text(self) -> str:
        return "".join(self.parts).strip()


class PlainTextConverter:
    """Projects HTML or Markdown to text without markup."""

    TARGET = TargetFormat.PLAIN

    def __init__(self, sanitizer: HtmlSanitizer = None):
        self.sanitizer = sanitizer or HtmlSanitizer()
        self.markdown = MarkdownToHtmlConverter(self.sanitizer)

    @classmethod
    def can_handle(cls, source: SourceFormat, target: TargetFormat) -> bool:
        return target is cls.TARGET

    def convert(self, content: str, source: SourceFormat = SourceFormat.HTML) -> str:
        if not content or not content.strip():
            return ""

        if source is SourceFormat.MARKDOWN:
            html = self.markdown.convert(content)
        else:
            html = self.sanitizer.sanitize(content)

        soup = BeautifulSoup(html, "html.parser")
        buffer = _LineBuffer()
        for child in soup.children:
            _walk(child, buffer, in_pre=False)
        return buffer.text()

    def length(self, content: str, source: SourceFormat = SourceFormat.HTML) -> int:
        return len(self.convert(content, source))


def _walk(node, buffer: _LineBuffer, in_pre: bool) -> None:
    if isinstance(node, Comment):
        return

    if isinstance(node, NavigableString):
        if in_pre:
            buffer.add_raw(str(node))
        else:
            buffer.add_text(_WHITESPACE.sub(" ", str(node)))
        return

    if not isinstance(node, Tag):
        return

    if node.name == "br":
        buffer.line_break()
        return

    is_block = node.name in BLOCK_TAGS
    if is_block:
        buffer.end_block()

    inside_pre = in_pre or node.name == "pre"
    for child in node.children:
        _walk(child, buffer, inside_pre)

    if is_block:
        buffer.end_block()


def to_plain_text(content: str, source: SourceFormat = SourceFormat.HTML) -> str:
    return PlainTextConverter().convert(content, source)


def plain_text_length(content: str, source: SourceFormat = SourceFormat.HTML) -> int:
    return len(to_plain_text(content, source))
