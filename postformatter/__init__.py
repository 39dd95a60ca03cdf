"""
PostFormatter - Social Post Cross-Format Conversion Engine

Converts post text between the rich (HTML) and Markdown editing surfaces,
sanitizes untrusted HTML, counts plain-text length against the platform
limit, and exports HTML as Unicode-styled plain text for platforms that
have no native bold/italic markup.
"""

__version__ = "1.0.0"

from .core import PostFormatter
from .formats import (
    LINKEDIN_MAX_LENGTH,
    ClipboardPayload,
    CopyFormat,
    FormatterConfig,
    SourceFormat,
    TargetFormat,
)

__all__ = [
    "PostFormatter",
    "FormatterConfig",
    "SourceFormat",
    "TargetFormat",
    "CopyFormat",
    "ClipboardPayload",
    "LINKEDIN_MAX_LENGTH",
]
