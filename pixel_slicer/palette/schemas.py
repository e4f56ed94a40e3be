"""
Schemas for palette module
"""

from typing import Sequence, Tuple
from pydantic import BaseModel


def rgba_to_hex(color: Sequence[int]) -> str:
    """Format the RGB channels of a color as #RRGGBB"""
    return f"#{color[0]:02X}{color[1]:02X}{color[2]:02X}"


class ColorCount(BaseModel):
    """Occurrences of one exact RGBA color"""
    color: Tuple[int, int, int, int]
    count: int

    @property
    def hex(self) -> str:
        """RGB part as #RRGGBB; alpha is ignored"""
        return rgba_to_hex(self.color)
