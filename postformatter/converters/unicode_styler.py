"""
Unicode Style Converter

Turns sanitized HTML into plain text for platforms that cannot render
markup. Inline styling becomes Unicode glyph substitution (bold, italic,
combining underline) and block structure becomes textual conventions
(blank lines, bullets, quote marks, fenced code).

The result is one-way: nothing parses it back into HTML.

Every allowed tag has an entry in TAG_RULES. A rule receives the element
and the already-converted text of its children and returns the text that
replaces the element.
"""

import re
from typing import Callable

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from ..formats import SourceFormat, TargetFormat
from ..unicode_maps import to_bold, to_italic, to_underline
from .sanitizer import HtmlSanitizer

BULLET = "•"
QUOTE_OPEN = "❝"
QUOTE_CLOSE = "❞"
FENCE = "```"

# Containers whose newline-only text children are source formatting
_LAYOUT_PARENTS = frozenset({"[document]", "ul", "ol", "blockquote"})

_EXCESS_NEWLINES = re.compile(r"\n{3,}")

Rule = Callable[[Tag, str], str]


def _identity(el: Tag, text: str) -> str:
    return text


def _bold(el: Tag, text: str) -> str:
    return to_bold(text)


def _italic(el: Tag, text: str) -> str:
    return to_italic(text)


def _underline(el: Tag, text: str) -> str:
    return to_underline(text)


def _strike(el: Tag, text: str) -> str:
    return f"~{text}~"


def _title(el: Tag, text: str) -> str:
    return f"\n\n{to_bold(text.upper())}\n\n"


def _heading(el: Tag, text: str) -> str:
    return f"\n\n{to_bold(text)}\n\n"


def _subheading(el: Tag, text: str) -> str:
    # h3 and below: blank line before, single line break after
    return f"\n\n{to_bold(text)}\n"


def _paragraph(el: Tag, text: str) -> str:
    return f"{text}\n\n"


def _line_break(el: Tag, text: str) -> str:
    return "\n"


def _list_item(el: Tag, text: str) -> str:
    return f"{BULLET} {text.strip()}\n"


def _list(el: Tag, text: str) -> str:
    return f"\n{text}\n"


def _blockquote(el: Tag, text: str) -> str:
    return f"\n{QUOTE_OPEN} {text.strip()} {QUOTE_CLOSE}\n\n"


def _code(el: Tag, text: str) -> str:
    if el.find_parent("pre") is not None:
        return text
    return f"`{text}`"


def _preformatted(el: Tag, text: str) -> str:
    body = text.rstrip("\n")
    return f"\n{FENCE}\n{body}\n{FENCE}\n\n"


def _anchor(el: Tag, text: str) -> str:
    href = el.get("href")
    return f"{text} ({href})" if href else text


TAG_RULES: dict[str, Rule] = {
    "strong": _bold,
    "b": _bold,
    "em": _italic,
    "i": _italic,
    "u": _underline,
    "s": _strike,
    "del": _strike,
    "strike": _strike,
    "h1": _title,
    "h2": _heading,
    "h3": _subheading,
    "h4": _subheading,
    "h5": _subheading,
    "h6": _subheading,
    "p": _paragraph,
    "br": _line_break,
    "li": _list_item,
    "ul": _list,
    "ol": _list,
    "blockquote": _blockquote,
    "code": _code,
    "pre": _preformatted,
    "a": _anchor,
}


class UnicodeStyleConverter:
    """Folds an HTML tree into Unicode-styled plain text."""

    SOURCE = SourceFormat.HTML
    TARGET = TargetFormat.UNICODE

    def __init__(self, sanitizer: HtmlSanitizer = None, number_ordered_lists: bool = False):
        self.sanitizer = sanitizer or HtmlSanitizer()
        self.number_ordered_lists = number_ordered_lists

    @classmethod
    def can_handle(cls, source: SourceFormat, target: TargetFormat) -> bool:
        return source is cls.SOURCE and target is cls.TARGET

    def convert(self, html: str) -> str:
        if not html or not html.strip():
            return ""

        soup = BeautifulSoup(self.sanitizer.sanitize(html), "html.parser")
        result = "".join(self._fold(child) for child in soup.children)
        return _EXCESS_NEWLINES.sub("\n\n", result).strip()

    def _fold(self, node) -> str:
        if isinstance(node, Comment):
            return ""

        if isinstance(node, NavigableString):
            return _text_leaf(node)

        if not isinstance(node, Tag):
            return ""

        text = "".join(self._fold(child) for child in node.children)

        if node.name == "li" and self.number_ordered_lists:
            position = _ordered_position(node)
            if position is not None:
                return f"{position}. {text.strip()}\n"

        rule = TAG_RULES.get(node.name, _identity)
        return rule(node, text)


def _text_leaf(node: NavigableString) -> str:
    text = str(node)
    parent = node.parent.name if node.parent is not None else "[document]"

    if parent in _LAYOUT_PARENTS and "\n" in text and not text.strip():
        return ""

    # python-markdown writes "<br />\n"; the <br> already is the break
    previous = node.previous_sibling
    if isinstance(previous, Tag) and previous.name == "br" and text.startswith("\n"):
        text = text[1:]

    return text


def _ordered_position(item: Tag):
    """1-based position of an <li> inside an <ol>, or None."""
    parent = item.parent
    if not isinstance(parent, Tag) or parent.name != "ol":
        return None
    for position, sibling in enumerate(parent.find_all("li", recursive=False), 1):
        if sibling is item:
            return position
    return None


def to_unicode_text(html: str) -> str:
    return UnicodeStyleConverter().convert(html)
