"""
PostFormatter Core Engine

The orchestrator that routes a piece of post content from the format an
editing surface produced to the format the caller needs: the other
editor's format on a mode switch, plain text for counting, or one of the
clipboard payloads on export.

All conversions are pure string-to-string functions; the engine keeps no
state between calls apart from its immutable configuration.
"""

import logging
from typing import Optional, Union

from .clipboard import ClipboardExporter, ClipboardSink
from .converters.html_converter import HtmlToMarkdownConverter
from .converters.markdown_converter import MarkdownToHtmlConverter
from .converters.plain_text import PlainTextConverter
from .converters.sanitizer import HtmlSanitizer
from .converters.unicode_styler import UnicodeStyleConverter
from .events import ConversionEvent, EventAction, EventListener, Stopwatch, notify
from .formats import (
    ClipboardPayload,
    CopyFormat,
    FormatterConfig,
    SourceFormat,
    TargetFormat,
    parse_copy_format,
    parse_source_format,
    parse_target_format,
)

logger = logging.getLogger(__name__)


class PostFormatter:
    """
    Main conversion engine.

    Accepts content from either editing surface and produces any of the
    target representations.
    """

    def __init__(self, config: FormatterConfig = None, listener: Optional[EventListener] = None):
        self.config = config or FormatterConfig()
        self.listener = listener

        self.sanitizer = HtmlSanitizer(protocols=self.config.allowed_protocols)
        self.html_to_markdown = HtmlToMarkdownConverter(self.sanitizer)
        self.markdown_to_html = MarkdownToHtmlConverter(self.sanitizer)
        self.plain_text = PlainTextConverter(self.sanitizer)
        self.unicode_styler = UnicodeStyleConverter(
            self.sanitizer,
            number_ordered_lists=self.config.number_ordered_lists,
        )

    def convert(
        self,
        content: str,
        source: Union[str, SourceFormat],
        target: Union[str, TargetFormat],
    ) -> str:
        """
        Convert content between formats.

        Args:
            content: HTML or Markdown text from an editing surface
            source: Format of ``content``
            target: Format to produce

        Returns:
            The converted text
        """
        source = parse_source_format(source)
        target = parse_target_format(target)
        watch = Stopwatch()

        result = self._route(content, source, target)

        notify(self.listener, self._event(EventAction.CONVERT, content, source, target.value, watch))
        return result

    def toggle_mode(
        self,
        content: str,
        source: Union[str, SourceFormat],
        target: Union[str, SourceFormat],
    ) -> str:
        """Convert editor content when the user switches editing surface."""
        source = parse_source_format(source)
        target = parse_source_format(target)
        watch = Stopwatch()

        if source is target:
            result = content
        else:
            result = self._route(content, source, TargetFormat(target.value))

        notify(
            self.listener,
            self._event(EventAction.TOGGLE_EDITOR_MODE, content, source, target.value, watch),
        )
        return result

    def _route(self, content: str, source: SourceFormat, target: TargetFormat) -> str:
        logger.debug("Routing %s -> %s", source.value, target.value)

        if self.plain_text.can_handle(source, target):
            return self.plain_text.convert(content, source)

        elif self.html_to_markdown.can_handle(source, target):
            return self.html_to_markdown.convert(content)

        elif self.markdown_to_html.can_handle(source, target):
            return self.markdown_to_html.convert(content)

        elif target is TargetFormat.UNICODE:
            return self.unicode_styler.convert(self.to_html(content, source))

        elif source is SourceFormat.HTML and target is TargetFormat.HTML:
            return self.sanitizer.sanitize(content)

        elif source is SourceFormat.MARKDOWN and target is TargetFormat.MARKDOWN:
            return content

        raise ValueError(f"No conversion from {source.value} to {target.value}")

    def to_html(self, content: str, source: Union[str, SourceFormat]) -> str:
        """Sanitized HTML for content from either surface."""
        source = parse_source_format(source)
        if source is SourceFormat.MARKDOWN:
            return self.markdown_to_html.convert(content)
        return self.sanitizer.sanitize(content)

    # --- Length accounting ---

    def plain_text_length(self, content: str, source: Union[str, SourceFormat]) -> int:
        """Character count compared against the platform limit."""
        return self.plain_text.length(content, parse_source_format(source))

    def is_within_limit(self, content: str, source: Union[str, SourceFormat]) -> bool:
        return self.plain_text_length(content, source) <= self.config.max_length

    # --- Export ---

    def build_payload(
        self,
        content: str,
        source: Union[str, SourceFormat],
        copy_format: Union[str, CopyFormat],
    ) -> ClipboardPayload:
        """Build the clipboard items for one of the export choices."""
        source = parse_source_format(source)
        copy_format = parse_copy_format(copy_format)

        if copy_format is CopyFormat.PLAIN:
            items = {"text/plain": self.plain_text.convert(content, source)}

        elif copy_format is CopyFormat.RICH:
            html = self.to_html(content, source)
            items = {
                "text/html": html,
                "text/plain": self.plain_text.convert(html, SourceFormat.HTML),
            }

        elif copy_format is CopyFormat.MARKDOWN:
            items = {"text/plain": self._route(content, source, TargetFormat.MARKDOWN)}

        else:
            items = {"text/plain": self._route(content, source, TargetFormat.UNICODE)}

        return ClipboardPayload(copy_format=copy_format, items=items)

    def copy(
        self,
        content: str,
        source: Union[str, SourceFormat],
        copy_format: Union[str, CopyFormat],
        sink: ClipboardSink,
    ) -> bool:
        """Build a payload and hand it to a clipboard sink."""
        watch = Stopwatch()
        source = parse_source_format(source)
        payload = self.build_payload(content, source, copy_format)

        success = ClipboardExporter(sink).copy(payload)

        event = self._event(
            EventAction.COPY_OUTPUT, content, source, payload.copy_format.value, watch, success
        )
        notify(self.listener, event)
        return success

    def _event(
        self,
        action: EventAction,
        content: str,
        source: SourceFormat,
        target: str,
        watch: Stopwatch,
        success: bool = True,
    ) -> Optional[ConversionEvent]:
        if self.listener is None:
            return None
        duration_ms = watch.elapsed_ms()
        chars = self.plain_text.length(content, source)
        return ConversionEvent(
            action=action,
            source_format=source.value,
            target_format=target,
            chars_total=chars,
            over_limit=chars > self.config.max_length,
            duration_ms=duration_ms,
            success=success,
        )

    @staticmethod
    def supported_formats() -> dict:
        """Return the accepted source formats and the producible targets."""
        return {
            "Sources": [f.value for f in SourceFormat],
            "Targets": [f.value for f in TargetFormat],
            "Clipboard payloads": [f.value for f in CopyFormat],
        }
