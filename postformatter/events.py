"""
Content-free notifications for analytics listeners.

Events describe what happened (format used, character count, elapsed
time) and never carry the post text itself.
"""

import logging
import time
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class EventAction(Enum):
    """Engine operations that produce a notification."""
    CONVERT = "convert"
    TOGGLE_EDITOR_MODE = "toggle_editor_mode"
    COPY_OUTPUT = "copy_output"


@dataclass(frozen=True)
class ConversionEvent:
    action: EventAction
    source_format: str
    target_format: str
    chars_total: int
    over_limit: bool
    duration_ms: float
    success: bool = True

    def to_dict(self) -> dict:
        data = asdict(self)
        data["action"] = self.action.value
        return data


EventListener = Callable[[ConversionEvent], None]


class Stopwatch:
    """Milliseconds elapsed since construction."""

    def __init__(self):
        self._start = time.perf_counter()

    def elapsed_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 3)


def notify(listener: Optional[EventListener], event: ConversionEvent) -> None:
    """Deliver an event; a failing listener never breaks a conversion."""
    if listener is None:
        return
    try:
        listener(event)
    except Exception:
        logger.warning("Event listener failed for %s", event.action.value, exc_info=True)
