"""
Cyclic cursor over the live-feed dataset.
"""
import threading
from typing import Callable, Iterator, Optional, Sequence

from ..domain import RawRow, TrafficWindow


class WindowCursor:
    """
    Offset marking where the next window starts.

    A window that would run past the end of the dataset is not spliced:
    the cursor restarts at 0 and the window is taken from the start.
    After every take the cursor moves forward by exactly one record,
    whatever the window size. Read, slice and advance happen under one
    lock so concurrent callers never see the same position.
    """
    def __init__(self, position: int = 0):
        if position < 0:
            raise ValueError("position must be non-negative")
        self._position = position
        self._dataset_length: Optional[int] = None
        self._lock = threading.Lock()

    @property
    def position(self) -> int:
        return self._position

    @property
    def dataset_length(self) -> Optional[int]:
        """Length seen on the last take, None before the first one."""
        return self._dataset_length

    def take(self, records: Sequence[RawRow], window_size: int) -> TrafficWindow:
        if window_size <= 0:
            raise ValueError("window_size must be positive")

        with self._lock:
            length = len(records)
            self._dataset_length = length
            if length == 0:
                self._position = 0
                return TrafficWindow(records=[], start=0, dataset_length=0, next_position=0)

            start = self._position
            window = records[start:start + window_size]
            if len(window) < window_size:
                start = 0
                window = records[:window_size]

            # Modulo uses the length just read, so a shorter file resyncs silently
            self._position = (start + 1) % length
            return TrafficWindow(
                records=list(window),
                start=start,
                dataset_length=length,
                next_position=self._position,
            )

    def reset(self):
        with self._lock:
            self._position = 0


def iter_windows(
    load_records: Callable[[], Sequence[RawRow]],
    window_size: int,
    cursor: Optional[WindowCursor] = None,
) -> Iterator[TrafficWindow]:
    """
    Lazy, infinite sequence of windows over a finite backing sequence.

    The loader is called once per window. Without an explicit cursor the
    generator owns a fresh one, so a new generator starts again at 0.
    """
    if cursor is None:
        cursor = WindowCursor()
    while True:
        yield cursor.take(load_records(), window_size)
