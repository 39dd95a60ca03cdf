"""
Markdown-to-HTML Converter

Renders Markdown editor text as sanitized HTML. Line breaks follow the
"breaks" convention of chat and social editors: a bare newline inside a
paragraph becomes <br>, a blank line starts a new paragraph.
"""

import html
import logging

from markdown import Markdown

from ..formats import SourceFormat, TargetFormat
from .escapes import EscapedCharsExtension
from .sanitizer import HtmlSanitizer
from .strikethrough import StrikethroughExtension

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = ["fenced_code", "sane_lists", "nl2br"]


class MarkdownToHtmlConverter:
    """Converts lightweight markup to sanitized structured markup."""

    SOURCE = SourceFormat.MARKDOWN
    TARGET = TargetFormat.HTML

    def __init__(self, sanitizer: HtmlSanitizer = None):
        self.sanitizer = sanitizer or HtmlSanitizer()

    @classmethod
    def can_handle(cls, source: SourceFormat, target: TargetFormat) -> bool:
        return source is cls.SOURCE and target is cls.TARGET

    def convert(self, text: str) -> str:
        """
        Convert Markdown to HTML.

        Raw HTML embedded in the Markdown is untrusted, so the rendered
        output always passes through the sanitizer. If rendering fails the
        text is returned as a single unstyled paragraph.
        """
        if not text or not text.strip():
            return ""

        try:
            # Markdown instances keep state between conversions
            renderer = Markdown(
                extensions=MARKDOWN_EXTENSIONS + [StrikethroughExtension(), EscapedCharsExtension()]
            )
            rendered = renderer.convert(text)
        except Exception:
            logger.error("Error converting Markdown to HTML", exc_info=True)
            rendered = _plain_paragraph(text)

        return self.sanitizer.sanitize(rendered)


def _plain_paragraph(text: str) -> str:
    return f"<p>{html.escape(text.strip(), quote=False)}</p>"


def markdown_to_html(text: str) -> str:
    return MarkdownToHtmlConverter().convert(text)
