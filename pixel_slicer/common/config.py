"""
Configuration management for pixel-slicer
"""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings"""
    
    # Input / output
    input_path: str = Field(
        default="src/2.webp",
        description="Image sliced when no path is given on the command line"
    )
    output_dir: str = Field(
        default="src/sliced",
        description="Directory receiving the tile images"
    )
    
    # Slicing
    tile_size: int = Field(
        default=16,
        description="Tile edge length in pixels"
    )
    
    # Color report
    top_colors: int = Field(
        default=5,
        description="Number of colors listed by the color report"
    )
    
    # Performance
    max_workers: Optional[int] = Field(
        default=None,
        description="Worker threads for tile export (None = CPU count)"
    )
    
    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Log file path"
    )
    
    class Config:
        env_prefix = "PIXEL_SLICER_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Create global settings instance
settings = Settings()
