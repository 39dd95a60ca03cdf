"""
Unit tests for conversion events.
"""

import logging

from postformatter.events import ConversionEvent, EventAction, Stopwatch, notify


def _event(**overrides):
    data = dict(
        action=EventAction.COPY_OUTPUT,
        source_format="html",
        target_format="rich",
        chars_total=12,
        over_limit=False,
        duration_ms=1.5,
    )
    data.update(overrides)
    return ConversionEvent(**data)


class TestConversionEvent:
    """Tests for ConversionEvent."""

    def test_to_dict(self):
        assert _event().to_dict() == {
            "action": "copy_output",
            "source_format": "html",
            "target_format": "rich",
            "chars_total": 12,
            "over_limit": False,
            "duration_ms": 1.5,
            "success": True,
        }

    def test_carries_no_content(self):
        """Test that events describe a conversion without the text."""
        assert set(_event().to_dict()) == {
            "action", "source_format", "target_format",
            "chars_total", "over_limit", "duration_ms", "success",
        }


class TestNotify:
    """Tests for notify()."""

    def test_delivers_event(self):
        received = []
        event = _event()
        notify(received.append, event)
        assert received == [event]

    def test_no_listener(self):
        notify(None, _event())

    def test_failing_listener_is_logged(self, caplog):
        """Test that listener errors never propagate."""
        def broken(event):
            raise RuntimeError("analytics down")

        with caplog.at_level(logging.WARNING, logger="postformatter.events"):
            notify(broken, _event())

        assert "Event listener failed for copy_output" in caplog.text


class TestStopwatch:
    def test_elapsed_is_non_negative(self):
        assert Stopwatch().elapsed_ms() >= 0
