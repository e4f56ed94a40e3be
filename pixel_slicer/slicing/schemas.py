"""
Schemas for slicing module
"""

from datetime import datetime
from typing import List, Tuple, Optional
from pydantic import BaseModel, Field, validator


class TileCoordinate(BaseModel):
    """Top-left pixel origin of a tile and its grid cell"""
    x: int
    y: int
    col: int
    row: int

    class Config:
        frozen = True

    def filename(self, template: str = "pixel_{col}_{row}.png") -> str:
        """Render the output file name for this tile"""
        return template.format(col=self.col, row=self.row)


class ImageInfo(BaseModel):
    """Properties of a decoded source image"""
    path: str
    width: int
    height: int
    color_mode: str  # mode of the file as decoded, before RGBA conversion

    @property
    def total_pixels(self) -> int:
        return self.width * self.height


class SlicingConfig(BaseModel):
    """Configuration for slicing operation"""
    tile_size: int = Field(default=16, description="Tile edge length in pixels")
    output_dir: str = Field(default="src/sliced", description="Directory for tile images")
    filename_template: str = Field(
        default="pixel_{col}_{row}.png",
        description="Tile file name, formatted with col and row"
    )
    max_workers: Optional[int] = Field(default=None, description="Worker threads (None = CPU count)")
    progress_bar_length: int = Field(default=40, description="Width of the console progress bar")

    @validator('tile_size')
    def validate_tile_size(cls, v):
        """Validate tile size"""
        if v <= 0:
            raise ValueError(f"Tile size must be positive: {v}")
        return v

    @validator('filename_template')
    def validate_filename_template(cls, v):
        """Tile names must be unique per grid cell and PNG encoded"""
        if "{col}" not in v or "{row}" not in v:
            raise ValueError(f"Filename template must contain {{col}} and {{row}}: {v}")
        if not v.lower().endswith(".png"):
            raise ValueError(f"Filename template must end with .png: {v}")
        return v

    @validator('max_workers')
    def validate_max_workers(cls, v):
        if v is not None and v < 1:
            raise ValueError(f"max_workers must be at least 1: {v}")
        return v

    @validator('progress_bar_length')
    def validate_bar_length(cls, v):
        if v <= 0:
            raise ValueError(f"Progress bar length must be positive: {v}")
        return v


class SlicingResult(BaseModel):
    """Result of slicing operation"""
    source_path: str
    output_dir: str
    image: ImageInfo
    config: SlicingConfig
    grid_size: Tuple[int, int]  # rows, cols
    total_tiles: int
    tiles_saved: int
    output_files: List[str] = Field(default_factory=list)
    processing_time: float  # seconds
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def completed(self) -> bool:
        """All tiles of the grid were written"""
        return self.tiles_saved == self.total_tiles
