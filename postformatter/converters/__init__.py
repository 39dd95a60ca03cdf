from .sanitizer import HtmlSanitizer
from .html_converter import HtmlToMarkdownConverter
from .markdown_converter import MarkdownToHtmlConverter
from .plain_text import PlainTextConverter
from .unicode_styler import UnicodeStyleConverter

__all__ = [
    "HtmlSanitizer",
    "HtmlToMarkdownConverter",
    "MarkdownToHtmlConverter",
    "PlainTextConverter",
    "UnicodeStyleConverter",
]
