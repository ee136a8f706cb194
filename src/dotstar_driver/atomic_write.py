"""Atomic text file writes for crash-safe config saves.

Uses the write-to-temp-then-rename pattern:
1. Write to a .tmp file in the same directory
2. Flush + fsync the file descriptor
3. Path.replace() onto the target path (atomic on POSIX)

A Pi losing power mid-save keeps the previous config intact.
"""

import os
from pathlib import Path
from typing import Union


def atomic_text_write(path: Union[str, Path], text: str) -> None:
    """Write text to path atomically.

    Raises:
        Any exception from file I/O. The tmp file is cleaned up on error.
    """
    path = Path(path)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(tmp_path, "w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    except BaseException:
        # Clean up tmp file on any error (including KeyboardInterrupt)
        try:
            tmp_path.unlink(missing_ok=True)
        except OSError:
            pass
        raise
