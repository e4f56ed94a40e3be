"""
Progress tracking for parallel tile export
"""

import math
import sys
import threading
from typing import Optional, TextIO

from .schemas import ImageInfo

BAR_FILL = "█"


class ProgressCounter:
    """Thread-safe count of exported tiles"""

    def __init__(self):
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> int:
        """Add one and return the new value"""
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_progress_line(
    count: int,
    total: int,
    bar_length: int = 40,
    fill: str = BAR_FILL
) -> str:
    """
    Render a single progress line

    Args:
        count: Tiles saved so far
        total: Tiles in the grid
        bar_length: Width of the bar in characters
        fill: Character used for the filled part

    Returns:
        Line such as "Progress: [████    ] 50% - 2 of 4 images saved"
    """
    if total:
        percentage = _round_half_up(count * 100 / total)
        filled = min(bar_length, _round_half_up(bar_length * count / total))
    else:
        percentage, filled = 100, bar_length
    bar = fill * filled + " " * (bar_length - filled)
    return f"Progress: [{bar}] {percentage}% - {count} of {total} images saved"


class ProgressReporter:
    """
    Console reporter shared by all export workers
    Writes are serialized so progress lines never interleave
    """

    def __init__(
        self,
        total: int = 0,
        stream: Optional[TextIO] = None,
        bar_length: int = 40,
        enabled: bool = True,
        show_progress: bool = True
    ):
        self.total = total
        self.stream = stream if stream is not None else sys.stdout
        self.bar_length = bar_length
        self.enabled = enabled
        self.show_progress = show_progress  # in-place progress line only
        self.counter = ProgressCounter()
        self._write_lock = threading.Lock()

    def _emit(self, text: str):
        # caller holds _write_lock
        if self.enabled:
            self.stream.write(text)
            self.stream.flush()

    def _write(self, text: str):
        with self._write_lock:
            self._emit(text)

    def announce(self, info: ImageInfo, total: int):
        """Start a run: reset the counter and print image properties"""
        with self._write_lock:
            self.total = total
            self.counter = ProgressCounter()
            self._emit(
                f"Image Dimensions: {info.width} x {info.height}\n"
                f"Color Type: {info.color_mode}\n"
                f"Total Pixels: {info.total_pixels}\n"
                f"Total pixel images to be processed: {total}\n"
            )

    def advance(self) -> int:
        """Record one saved tile and redraw the progress line"""
        with self._write_lock:
            count = self.counter.increment()
            if self.show_progress:
                line = format_progress_line(count, self.total, self.bar_length)
                self._emit(f"\r{line}")
        return count

    def finish(self, output_dir) -> None:
        prefix = "\n" if self.show_progress else ""
        self._write(
            f"{prefix}Slicing completed, saved {self.counter.value} pixel images to {output_dir}\n"
        )
