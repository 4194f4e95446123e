"""The application's event queue: terminal input, job progress and signals."""

from __future__ import annotations

import enum
import queue
import signal
import threading
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class AppEvent:
    """One event for the main loop; ``payload`` depends on ``kind``."""

    class Kind(enum.Enum):
        TERMINAL = enum.auto()
        IO_PROGRESS = enum.auto()
        IO_RESULT = enum.auto()
        SIGNAL = enum.auto()

    kind: AppEvent.Kind
    payload: object = None


class Events:
    """Gathers events from an input source, signal handlers and workers.

    Terminal input is read one event ahead: after the first event, the next
    one is read only once :meth:`flush` has been called.
    """

    def __init__(
        self,
        input_source: Iterable[object] | None = None,
        *,
        watch_resize: bool = False,
    ) -> None:
        self._events: queue.Queue[AppEvent] = queue.Queue()
        self._input_ready: queue.Queue[None] = queue.Queue(maxsize=1)
        if watch_resize:
            signal.signal(signal.SIGWINCH, self._on_signal)
        if input_source is not None:
            reader = threading.Thread(
                target=self._read_input, args=(iter(input_source),), daemon=True
            )
            reader.start()

    def _on_signal(self, signum: int, _frame: object) -> None:
        self.send(AppEvent(AppEvent.Kind.SIGNAL, signum))

    def _read_input(self, source: Iterator[object]) -> None:
        try:
            first = next(source)
        except Exception:
            return
        self.send(AppEvent(AppEvent.Kind.TERMINAL, first))
        while True:
            self._input_ready.get()
            try:
                event = next(source)
            except StopIteration:
                return
            except Exception:
                continue
            self.send(AppEvent(AppEvent.Kind.TERMINAL, event))

    def send(self, event: AppEvent) -> None:
        """Queue an event for the main loop."""
        self._events.put(event)

    def next(self, timeout: float | None = None) -> AppEvent:
        """Wait for the next event; raise TimeoutError if ``timeout`` passes first."""
        try:
            return self._events.get(timeout=timeout)
        except queue.Empty:
            raise TimeoutError("no event arrived in time") from None

    def flush(self) -> None:
        """Allow the input reader to deliver the next terminal event."""
        try:
            self._input_ready.put_nowait(None)
        except queue.Full:
            pass