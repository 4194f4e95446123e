import threading
from pathlib import Path

from tricolumn.canvas import Canvas, Rect
from tricolumn.format import file_size_to_string
from tricolumn.io_observer import IoWorkerObserver
from tricolumn.io_worker import FileOp, IoWorkerProgress, IoWorkerThread
from tricolumn.worker_view import render_worker


def _observer(progress=None):
    observer = IoWorkerObserver(
        threading.Thread(target=lambda: None), Path("/src"), Path("/dest")
    )
    if progress is not None:
        observer.set_progress(progress)
    return observer


def test_idle_view():
    canvas = Canvas(40, 6)
    render_worker(canvas, Rect(0, 1, 40, 5), None, [])
    assert canvas.row(2).startswith("No operations running")
    assert canvas.row(4).startswith("Queue:")


def test_running_job_message():
    canvas = Canvas(80, 10)
    progress = IoWorkerProgress(FileOp.COPY, 1, 4, 100, 400)
    render_worker(canvas, Rect(0, 1, 80, 9), _observer(progress), [])
    row = canvas.row(2)
    assert row.startswith("Copying")
    assert file_size_to_string(400) in row
    assert '"/dest"' in row
    assert canvas.row(5).startswith("Queue:")


def test_progress_bar_width():
    canvas = Canvas(80, 10)
    progress = IoWorkerProgress(FileOp.CUT, 1, 4, 0, 0)
    render_worker(canvas, Rect(0, 1, 80, 9), _observer(progress), [])
    filled = sum("bg:blue" in style for style in canvas.styles[3])
    assert filled == 20
    assert canvas.row(2).startswith("Moving")


def test_queue_listing():
    canvas = Canvas(80, 10)
    progress = IoWorkerProgress(FileOp.COPY, 0, 1, 0, 0)
    queue = [
        IoWorkerThread(FileOp.CUT, [Path("/a"), Path("/b")], Path("/target")),
        IoWorkerThread(FileOp.COPY, [Path("/c")], Path("/other")),
    ]
    render_worker(canvas, Rect(0, 1, 80, 9), _observer(progress), queue)
    assert canvas.row(7).startswith("01 Move 2 items")
    assert canvas.row(7).rstrip().endswith('"/target"')
    assert canvas.row(8).startswith("02 Copy")


def test_zero_total_files_draws_no_bar():
    canvas = Canvas(40, 8)
    progress = IoWorkerProgress(FileOp.COPY, 0, 0, 0, 0)
    render_worker(canvas, Rect(0, 1, 40, 7), _observer(progress), [])
    assert not any("bg:blue" in style for style in canvas.styles[3])


def test_observer_without_progress_draws_nothing():
    canvas = Canvas(40, 8)
    render_worker(canvas, Rect(0, 1, 40, 7), _observer(), [])
    assert all(canvas.row(y).strip() == "" for y in range(8))