"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from postformatter import FormatterConfig, PostFormatter
from postformatter.converters import (
    HtmlSanitizer,
    HtmlToMarkdownConverter,
    MarkdownToHtmlConverter,
    PlainTextConverter,
    UnicodeStyleConverter,
)
from tests.fixtures import SAMPLE_HTML_POST, SAMPLE_MARKDOWN_POST, RecordingClipboard


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Converter Fixtures
# ============================================================================


@pytest.fixture
def sanitizer():
    """Create a sanitizer with the default allow-lists."""
    return HtmlSanitizer()


@pytest.fixture
def html_to_md(sanitizer):
    """Create an HTML-to-Markdown converter."""
    return HtmlToMarkdownConverter(sanitizer)


@pytest.fixture
def md_to_html(sanitizer):
    """Create a Markdown-to-HTML converter."""
    return MarkdownToHtmlConverter(sanitizer)


@pytest.fixture
def plain(sanitizer):
    """Create a plain-text projector."""
    return PlainTextConverter(sanitizer)


@pytest.fixture
def styler(sanitizer):
    """Create a Unicode style converter with bulleted ordered lists."""
    return UnicodeStyleConverter(sanitizer)


@pytest.fixture
def numbered_styler(sanitizer):
    """Create a Unicode style converter that numbers ordered lists."""
    return UnicodeStyleConverter(sanitizer, number_ordered_lists=True)


# ============================================================================
# Engine Fixtures
# ============================================================================


@pytest.fixture
def events():
    """Collects events delivered to a listener."""
    return []


@pytest.fixture
def engine():
    """Create an engine with the default configuration."""
    return PostFormatter()


@pytest.fixture
def listening_engine(events):
    """Create an engine that records its events."""
    return PostFormatter(listener=events.append)


@pytest.fixture
def short_limit_engine():
    """Create an engine with a 10 character limit."""
    return PostFormatter(config=FormatterConfig(max_length=10))


@pytest.fixture
def clipboard():
    """A clipboard sink that accepts everything."""
    return RecordingClipboard()


# ============================================================================
# Content Fixtures
# ============================================================================


@pytest.fixture
def html_post():
    return SAMPLE_HTML_POST


@pytest.fixture
def markdown_post():
    return SAMPLE_MARKDOWN_POST


@pytest.fixture
def html_file(tmp_path, html_post):
    """Create a temporary HTML draft."""
    file_path = tmp_path / "draft.html"
    file_path.write_text(html_post, encoding="utf-8")
    return file_path


@pytest.fixture
def markdown_file(tmp_path, markdown_post):
    """Create a temporary Markdown draft."""
    file_path = tmp_path / "draft.md"
    file_path.write_text(markdown_post, encoding="utf-8")
    return file_path
