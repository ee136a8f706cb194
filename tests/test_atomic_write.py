"""Tests for atomic text write utility."""

from pathlib import Path
from unittest.mock import patch

import pytest

from dotstar_driver.atomic_write import atomic_text_write


class TestAtomicTextWrite:
    """Test atomic_text_write function."""

    def test_basic_write(self, tmp_path):
        target = tmp_path / "strip.yaml"
        atomic_text_write(target, "led_count: 30\n")
        assert target.read_text() == "led_count: 30\n"

    def test_overwrites_existing(self, tmp_path):
        """Atomic write replaces existing file."""
        target = tmp_path / "strip.yaml"
        target.write_text("led_count: 1\n")
        atomic_text_write(target, "led_count: 2\n")
        assert target.read_text() == "led_count: 2\n"

    def test_creates_parent_directories(self, tmp_path):
        target = tmp_path / "sub" / "dir" / "strip.yaml"
        atomic_text_write(target, "x: 1\n")
        assert target.exists()

    def test_no_tmp_file_on_success(self, tmp_path):
        target = tmp_path / "strip.yaml"
        atomic_text_write(target, "x: 1\n")
        assert list(tmp_path.iterdir()) == [target]

    def test_preserves_original_on_error(self, tmp_path):
        """If the write fails, the original file and no tmp file remain."""
        target = tmp_path / "strip.yaml"
        target.write_text("original: true\n")

        with patch("dotstar_driver.atomic_write.os.fsync", side_effect=OSError("disk gone")):
            with pytest.raises(OSError):
                atomic_text_write(target, "new: true\n")

        assert target.read_text() == "original: true\n"
        assert list(tmp_path.iterdir()) == [target]

    def test_accepts_string_path(self, tmp_path):
        target = str(tmp_path / "strip.json")
        atomic_text_write(target, "[1, 2, 3]")
        assert Path(target).read_text() == "[1, 2, 3]"

    def test_uses_rename(self, tmp_path):
        """Verifies the rename (replace) pattern is used."""
        target = tmp_path / "strip.yaml"

        original_replace = Path.replace
        replace_called = []

        def tracking_replace(self_path, target_path):
            replace_called.append((str(self_path), str(target_path)))
            return original_replace(self_path, target_path)

        with patch.object(Path, "replace", tracking_replace):
            atomic_text_write(target, "x: 1\n")

        assert len(replace_called) == 1
        assert replace_called[0][0].endswith(".tmp")
        assert replace_called[0][1] == str(target)
