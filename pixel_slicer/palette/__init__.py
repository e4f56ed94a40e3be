"""
Palette Module
Counts pixel colors and reports the most common ones
"""

from .analyzer import ColorFrequencyAnalyzer
from .schemas import ColorCount, rgba_to_hex

__all__ = [
    "ColorFrequencyAnalyzer",
    "ColorCount",
    "rgba_to_hex"
]
