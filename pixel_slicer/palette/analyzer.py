"""
Color frequency analysis
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import numpy as np
from PIL import Image

from .schemas import ColorCount
from ..common.exceptions import ImageDecodeError

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int, int]


class ColorFrequencyAnalyzer:
    """Counts exact pixel colors and ranks them by frequency"""

    def __init__(self, top_n: int = 5):
        if top_n <= 0:
            raise ValueError(f"top_n must be positive: {top_n}")
        self.top_n = top_n

    def count_colors(self, image: Image.Image) -> Dict[Color, int]:
        """
        Count occurrences of every RGBA color in the image

        Args:
            image: Decoded image in any mode

        Returns:
            Mapping of color to pixel count
        """
        pixels = np.asarray(image.convert("RGBA")).reshape(-1, 4)
        if pixels.size == 0:
            return {}

        colors, counts = np.unique(pixels, axis=0, return_counts=True)
        return {
            tuple(int(c) for c in color): int(count)
            for color, count in zip(colors, counts)
        }

    def top_colors(
        self,
        table: Dict[Color, int],
        n: Optional[int] = None
    ) -> List[ColorCount]:
        """Most frequent colors first; order among equal counts is unspecified"""
        n = self.top_n if n is None else n
        ranked = sorted(table.items(), key=lambda item: item[1], reverse=True)
        return [ColorCount(color=color, count=count) for color, count in ranked[:n]]

    def analyze(self, image_path: Union[str, Path]) -> List[ColorCount]:
        """
        Decode an image and report its most common colors

        Args:
            image_path: Path to input image

        Returns:
            Up to top_n ColorCount objects
        """
        path = Path(image_path)
        try:
            with Image.open(path) as img:
                table = self.count_colors(img)
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            raise ImageDecodeError(f"Failed to open image {path}: {e}") from e

        logger.info(f"Found {len(table)} distinct colors in {path}")
        return self.top_colors(table)

    def format_report(self, colors: List[ColorCount]) -> str:
        lines = [f"Top {self.top_n} colors:"]
        lines.extend(f"Color: {c.hex}, Count: {c.count}" for c in colors)
        return "\n".join(lines)
