"""
Shared test fixtures for the dotstar-driver test suite.

These fixtures provide sinks and controllers that many test files need.
Local fixtures in individual test files override these (pytest convention).
"""

import pytest

from dotstar_driver import Controller, disable_gamma_correction


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------

class RecordingSink:
    """Accepts every frame and keeps a copy."""

    def __init__(self):
        self.frames = []

    def write(self, data):
        self.frames.append(bytes(data))
        return len(data)


class ShortSink:
    """Accepts all but the last `missing` bytes without raising."""

    def __init__(self, missing=1):
        self.missing = missing

    def write(self, data):
        return len(data) - self.missing


class FailingSink:
    """Raises like a broken SPI device."""

    def write(self, data):
        raise OSError(5, "Input/output error")


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def short_sink():
    return ShortSink()


@pytest.fixture
def failing_sink():
    return FailingSink()


# ---------------------------------------------------------------------------
# Controllers
# ---------------------------------------------------------------------------

@pytest.fixture
def controller(sink):
    """Ten LEDs, default order and gamma."""
    return Controller(sink, 10)


@pytest.fixture
def linear_controller(sink):
    """Ten LEDs, default order, no gamma - channel bytes equal stored values."""
    return Controller(sink, 10, disable_gamma_correction())


def record(frame, position):
    """The 4-byte record for LED `position` inside a frame."""
    start = 4 + 4 * position
    return frame[start:start + 4]
