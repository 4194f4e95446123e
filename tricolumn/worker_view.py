"""The screen that shows the running paste job and the queue behind it."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from tricolumn.canvas import DEFAULT_STYLE, Canvas, Rect
from tricolumn.format import file_size_to_string
from tricolumn.io_observer import IoWorkerObserver
from tricolumn.io_worker import FileOp, IoWorkerThread

_BAR_STYLE = frozenset({"bg:blue"})
_HEADING_STYLE = frozenset({"fg:yellow", "bold"})


def _quoted(path: Path) -> str:
    text = str(path).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def render_worker(
    canvas: Canvas,
    area: Rect,
    observer: IoWorkerObserver | None,
    queue: Iterable[IoWorkerThread],
) -> None:
    """Draw the current job's progress and bar, then the queued jobs."""
    width = area.width
    if observer is None:
        canvas.set_stringn(0, 2, "No operations running", width, DEFAULT_STYLE)
        canvas.set_stringn(0, 4, "Queue:", width, _HEADING_STYLE)
        return

    progress = observer.progress
    if progress is None:
        return

    op_str = "Copying" if progress.kind is FileOp.COPY else "Moving"
    processed = file_size_to_string(progress.bytes_processed)
    total = file_size_to_string(progress.total_bytes)
    msg = (
        f"{op_str} ({progress.files_processed + 1}/{progress.total_files}) "
        f"({processed}/{total}) {_quoted(observer.dest_path)}"
    )
    canvas.set_stringn(0, 2, msg, width, DEFAULT_STYLE)

    if progress.total_files:
        bar_width = int(progress.files_processed / progress.total_files * width)
    else:
        bar_width = 0
    bar_width = max(0, min(bar_width, width))
    canvas.set_stringn(0, 3, " " * bar_width, width, _BAR_STYLE)

    canvas.set_stringn(0, 5, "Queue:", width, _HEADING_STYLE)
    for i, job in enumerate(queue):
        job_op = "Copy" if job.kind is FileOp.COPY else "Move"
        line = f"{i + 1:02} {job_op} {len(job.paths)} items {_quoted(job.dest)}"
        canvas.set_stringn(0, 5 + i + 2, line, width, DEFAULT_STYLE)