# Test fixtures
from .sample_posts import (
    SAMPLE_HTML_POST,
    SAMPLE_MARKDOWN_POST,
    UNSAFE_HTML,
    ROUND_TRIP_HTML,
    LOSSY_HTML,
    LITERAL_TEXT_HTML,
    RecordingClipboard,
)

__all__ = [
    "SAMPLE_HTML_POST",
    "SAMPLE_MARKDOWN_POST",
    "UNSAFE_HTML",
    "ROUND_TRIP_HTML",
    "LOSSY_HTML",
    "LITERAL_TEXT_HTML",
    "RecordingClipboard",
]
