"""
Slicing Module
Splits an image into fixed-size solid-color tiles exported in parallel
"""

from .engine import SlicingEngine, generate_tile_coordinates
from .schemas import TileCoordinate, SlicingConfig, SlicingResult, ImageInfo
from .progress import ProgressCounter, ProgressReporter, format_progress_line

__all__ = [
    "SlicingEngine",
    "generate_tile_coordinates",
    "TileCoordinate",
    "SlicingConfig",
    "SlicingResult",
    "ImageInfo",
    "ProgressCounter",
    "ProgressReporter",
    "format_progress_line"
]
