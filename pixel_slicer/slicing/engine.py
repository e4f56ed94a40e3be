"""
Slicing Engine - Core tile export functionality
"""

import logging
import os
import time
from pathlib import Path
from typing import List, Tuple, Optional, Union
from concurrent.futures import ThreadPoolExecutor, as_completed

import numpy as np
from PIL import Image
from tqdm import tqdm

from .schemas import (
    ImageInfo,
    SlicingConfig,
    SlicingResult,
    TileCoordinate
)
from .progress import ProgressReporter
from ..common.exceptions import (
    ImageDecodeError,
    OutputDirectoryError,
    TileWriteError
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def generate_tile_coordinates(
    width: int,
    height: int,
    tile_size: int = 16
) -> List[TileCoordinate]:
    """
    Generate the origins of every fully contained tile

    Args:
        width: Image width in pixels
        height: Image height in pixels
        tile_size: Tile edge length in pixels

    Returns:
        Coordinates in row-major order; partial edge tiles are dropped
    """
    if tile_size <= 0:
        raise ValueError(f"Tile size must be positive: {tile_size}")

    cols = max(width, 0) // tile_size
    rows = max(height, 0) // tile_size

    return [
        TileCoordinate(x=col * tile_size, y=row * tile_size, col=col, row=row)
        for row in range(rows)
        for col in range(cols)
    ]


class SlicingEngine:
    """
    Splits an image into solid-color tile images
    Each tile is filled with the pixel at its origin and exported in parallel
    """

    def __init__(self, config: Optional[SlicingConfig] = None):
        """
        Initialize slicing engine

        Args:
            config: Slicing configuration
        """
        self.config = config or SlicingConfig()

    @property
    def max_workers(self) -> int:
        return self.config.max_workers or os.cpu_count() or 1

    def calculate_grid_size(
        self,
        image_width: int,
        image_height: int
    ) -> Tuple[int, int]:
        """
        Calculate grid dimensions, ignoring partial tiles

        Returns:
            Tuple of (rows, cols)
        """
        tile_size = self.config.tile_size
        return max(image_height, 0) // tile_size, max(image_width, 0) // tile_size

    def load_image(self, image_path: PathLike) -> Tuple[Image.Image, ImageInfo]:
        """
        Decode an image into RGBA

        Args:
            image_path: Path to input image

        Returns:
            Tuple of (rgba_image, info)
        """
        path = Path(image_path)
        try:
            with Image.open(path) as img:
                color_mode = img.mode
                rgba = img.convert("RGBA")
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            raise ImageDecodeError(f"Failed to open image {path}: {e}") from e

        info = ImageInfo(
            path=str(path),
            width=rgba.width,
            height=rgba.height,
            color_mode=color_mode
        )
        return rgba, info

    def prepare_output_dir(self, output_dir: PathLike) -> Path:
        """Create the output directory and its parents"""
        out_dir = Path(output_dir)
        try:
            out_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputDirectoryError(
                f"Failed to create output directory {out_dir}: {e}"
            ) from e
        return out_dir

    def export_tile(
        self,
        pixels: np.ndarray,
        coordinate: TileCoordinate,
        output_dir: Path
    ) -> Path:
        """
        Write one tile filled with the color at its origin

        Args:
            pixels: RGBA pixel array of shape (height, width, 4)
            coordinate: Tile origin
            output_dir: Directory for the tile file

        Returns:
            Path of the written file
        """
        color = tuple(int(c) for c in pixels[coordinate.y, coordinate.x])
        tile_size = self.config.tile_size
        tile = Image.new("RGBA", (tile_size, tile_size), color)

        output_path = output_dir / coordinate.filename(self.config.filename_template)
        try:
            tile.save(output_path, format="PNG")
        except (OSError, ValueError) as e:
            raise TileWriteError(f"Failed to save tile {output_path}: {e}") from e

        return output_path

    def _export_and_report(
        self,
        pixels: np.ndarray,
        coordinate: TileCoordinate,
        output_dir: Path,
        reporter: ProgressReporter
    ) -> Path:
        output_path = self.export_tile(pixels, coordinate, output_dir)
        reporter.advance()
        return output_path

    def slice_image(
        self,
        image_path: PathLike,
        output_dir: Optional[PathLike] = None,
        reporter: Optional[ProgressReporter] = None
    ) -> SlicingResult:
        """
        Slice an image into tile files

        The image is decoded before anything is written. The first failed
        tile aborts the run: queued tiles are cancelled, running ones finish.

        Args:
            image_path: Path to input image
            output_dir: Directory for output tiles (defaults to config)
            reporter: Console progress reporter

        Returns:
            SlicingResult object
        """
        start_time = time.time()

        image, info = self.load_image(image_path)
        out_dir = self.prepare_output_dir(output_dir or self.config.output_dir)

        rows, cols = self.calculate_grid_size(info.width, info.height)
        coordinates = generate_tile_coordinates(info.width, info.height, self.config.tile_size)
        total_tiles = len(coordinates)

        if reporter is None:
            reporter = ProgressReporter(bar_length=self.config.progress_bar_length)
        reporter.announce(info, total_tiles)

        logger.info(
            f"Slicing {info.path} into {rows}x{cols} grid "
            f"({total_tiles} tiles, {self.max_workers} workers)"
        )

        pixels = np.asarray(image)

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [
                executor.submit(self._export_and_report, pixels, coordinate, out_dir, reporter)
                for coordinate in coordinates
            ]
            try:
                for future in as_completed(futures):
                    future.result()
            except Exception as e:
                executor.shutdown(wait=False, cancel_futures=True)
                logger.error(f"Slicing aborted after {reporter.counter.value} tiles: {e}")
                raise

        output_files = [str(future.result()) for future in futures]
        reporter.finish(out_dir)

        processing_time = time.time() - start_time

        result = SlicingResult(
            source_path=info.path,
            output_dir=str(out_dir),
            image=info,
            config=self.config,
            grid_size=(rows, cols),
            total_tiles=total_tiles,
            tiles_saved=reporter.counter.value,
            output_files=output_files,
            processing_time=processing_time
        )

        logger.info(f"Slicing completed: {result.tiles_saved} tiles in {processing_time:.2f} seconds")

        return result

    def slice_image_batch(
        self,
        image_paths: List[PathLike],
        output_dir: Optional[PathLike] = None,
        quiet: bool = False
    ) -> List[SlicingResult]:
        """
        Slice multiple images, each into its own subdirectory

        Args:
            image_paths: List of input image paths
            output_dir: Parent directory; tiles go to <output_dir>/<image stem>
            quiet: Hide the batch progress bar and per-image console lines

        Returns:
            List of SlicingResult objects
        """
        base_dir = Path(output_dir or self.config.output_dir)
        results = []

        for image_path in tqdm(image_paths, desc="Slicing images", unit="image", disable=quiet):
            reporter = ProgressReporter(
                bar_length=self.config.progress_bar_length,
                enabled=not quiet,
                show_progress=False
            )
            result = self.slice_image(
                image_path,
                base_dir / Path(image_path).stem,
                reporter=reporter
            )
            results.append(result)

        logger.info(f"Batch completed: {len(results)} images sliced into {base_dir}")

        return results
