"""
Format identifiers, tag allow-lists and shared data structures.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union


LINKEDIN_MAX_LENGTH = 3000

# Tags reachable from the two editing surfaces
ALLOWED_TAGS = frozenset({
    "p", "br",
    "strong", "b", "em", "i", "u", "s", "del", "strike",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "ul", "ol", "li",
    "a", "code", "pre", "blockquote",
})

ALLOWED_ATTRIBUTES = {
    "a": ["href", "target", "rel"],
}

ALLOWED_PROTOCOLS = ("http", "https", "mailto", "tel")

# Elements that end a line in plain-text projections
BLOCK_TAGS = frozenset({
    "p", "h1", "h2", "h3", "h4", "h5", "h6",
    "ul", "ol", "li", "pre", "blockquote",
})


class SourceFormat(Enum):
    """Representations produced by the editing surfaces."""
    HTML = "html"
    MARKDOWN = "markdown"


class TargetFormat(Enum):
    """Representations the engine can produce."""
    HTML = "html"
    MARKDOWN = "markdown"
    PLAIN = "plain"
    UNICODE = "unicode"


class CopyFormat(Enum):
    """Clipboard payload choices offered to the caller."""
    PLAIN = "plain"
    RICH = "rich"
    MARKDOWN = "markdown"
    UNICODE = "unicode"


def parse_source_format(value: Union[str, SourceFormat]) -> SourceFormat:
    """Accept either an enum member or its string value."""
    if isinstance(value, SourceFormat):
        return value
    try:
        return SourceFormat(str(value).lower())
    except ValueError:
        valid = ", ".join(f.value for f in SourceFormat)
        raise ValueError(f"Unknown source format: {value!r} (expected one of {valid})")


def parse_target_format(value: Union[str, TargetFormat]) -> TargetFormat:
    """Accept either an enum member or its string value."""
    if isinstance(value, TargetFormat):
        return value
    try:
        return TargetFormat(str(value).lower())
    except ValueError:
        valid = ", ".join(f.value for f in TargetFormat)
        raise ValueError(f"Unknown target format: {value!r} (expected one of {valid})")


def parse_copy_format(value: Union[str, CopyFormat]) -> CopyFormat:
    """Accept either an enum member or its string value."""
    if isinstance(value, CopyFormat):
        return value
    try:
        return CopyFormat(str(value).lower())
    except ValueError:
        valid = ", ".join(f.value for f in CopyFormat)
        raise ValueError(f"Unknown copy format: {value!r} (expected one of {valid})")


@dataclass(frozen=True)
class FormatterConfig:
    """Engine settings shared by the converters."""
    max_length: int = LINKEDIN_MAX_LENGTH
    number_ordered_lists: bool = False  # "1. " instead of "• " inside <ol>
    allowed_protocols: tuple[str, ...] = ALLOWED_PROTOCOLS

    def __post_init__(self):
        if self.max_length <= 0:
            raise ValueError(f"Max length must be positive, got {self.max_length}")
        if not self.allowed_protocols:
            raise ValueError("At least one URL protocol must be allowed")


@dataclass(frozen=True)
class ClipboardPayload:
    """
    Strings to hand to a clipboard sink, keyed by mime type.

    Rich payloads carry both text/html and its plain-text shadow so the
    target application can pick whichever it supports.
    """
    copy_format: CopyFormat
    items: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if "text/plain" not in self.items:
            raise ValueError("Clipboard payload needs a text/plain item")
        object.__setattr__(self, "items", MappingProxyType(dict(self.items)))

    @property
    def plain_text(self) -> str:
        return self.items["text/plain"]

    @property
    def is_rich(self) -> bool:
        return "text/html" in self.items
