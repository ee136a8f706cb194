"""Tests for byte sink adapters."""

import pytest

from dotstar_driver import CallableSink, Controller, TransportError
from dotstar_driver.controller import frame_size


class TestCallableSink:

    def test_none_means_all_written(self):
        received = []
        sink = CallableSink(received.append)
        assert sink.write(b"\x00\x01\x02") == 3
        assert received == [b"\x00\x01\x02"]

    def test_passes_count_through(self):
        sink = CallableSink(lambda data: 2)
        assert sink.write(b"\x00\x01\x02") == 2

    def test_drives_controller(self):
        received = []
        ctl = Controller(CallableSink(received.append), 8)
        ctl.update()
        assert received == [ctl.frame]
        assert len(received[0]) == frame_size(8)

    def test_short_count_fails_update(self):
        ctl = Controller(CallableSink(lambda data: len(data) // 2), 8)
        with pytest.raises(TransportError):
            ctl.update()
