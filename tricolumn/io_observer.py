"""Tracking of a running paste job from the user interface side."""

from __future__ import annotations

import threading
from pathlib import Path

from tricolumn.format import file_size_to_string
from tricolumn.io_worker import FileOp, IoWorkerProgress


class IoWorkerObserver:
    """Holds the thread running a job plus its latest progress and status message."""

    def __init__(self, handle: threading.Thread, src: Path, dest: Path) -> None:
        self.handle = handle
        self.progress: IoWorkerProgress | None = None
        self.msg = ""
        self.src_path = Path(src)
        self.dest_path = Path(dest)

    def join(self) -> bool:
        """Wait for the worker thread; return whether it has finished."""
        self.handle.join()
        return not self.handle.is_alive()

    def set_progress(self, progress: IoWorkerProgress) -> None:
        self.progress = progress

    def update_msg(self) -> None:
        """Rebuild the status message from the latest progress, if any."""
        progress = self.progress
        if progress is None:
            return
        op_str = "Moving" if progress.kind is FileOp.CUT else "Copying"
        processed = file_size_to_string(progress.bytes_processed)
        total = file_size_to_string(progress.total_bytes)
        self.msg = (
            f"{op_str} ({progress.files_processed + 1}/{progress.total_files}) "
            f"({processed}/{total}) completed"
        )