"""
Clipboard hand-off.

The engine does not talk to the OS clipboard itself. Callers supply a sink
(any object with ``write(items)`` taking a mime-type -> text mapping) and
the exporter reports whether the payload, or its plain-text fallback,
was accepted.
"""

import logging
from typing import Mapping, Protocol

from .formats import ClipboardPayload

logger = logging.getLogger(__name__)


class ClipboardError(Exception):
    """Raised by a sink when a clipboard write is denied or unsupported."""
    pass


class ClipboardSink(Protocol):
    def write(self, items: Mapping[str, str]) -> None:
        ...


class ClipboardExporter:
    """
    Writes payloads to a sink with a single plain-text fallback.

    There is no retry loop: if the full payload fails, the text/plain item
    is written on its own once, and the outcome of that write is final.
    Any exception raised by the sink counts as a failed write.
    """

    def __init__(self, sink: ClipboardSink):
        self.sink = sink

    def copy(self, payload: ClipboardPayload) -> bool:
        """Write the payload; return True if any write succeeded."""
        try:
            self.sink.write(payload.items)
            return True
        except Exception as e:
            logger.warning("Clipboard write failed (%s): %s", payload.copy_format.value, e)

        try:
            self.sink.write({"text/plain": payload.plain_text})
        except Exception as e:
            logger.error("Plain-text clipboard fallback failed: %s", e)
            return False

        logger.info("Copied plain-text fallback instead of %s payload", payload.copy_format.value)
        return True
