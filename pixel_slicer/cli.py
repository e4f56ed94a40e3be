"""
Command line entry point for pixel-slicer
"""

import argparse
import logging
import sys
from typing import List, Optional

from .common.config import settings
from .common.exceptions import SlicingError
from .palette import ColorFrequencyAnalyzer
from .slicing import SlicingConfig, SlicingEngine, ProgressReporter

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str, log_file: Optional[str] = None):
    """Configure root logging for a command line run"""
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixel-slicer",
        description="Split an image into solid-color tile images"
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default=settings.log_level,
        help='Logging level (default: %(default)s)'
    )
    parser.add_argument(
        '--log-file',
        type=str,
        default=settings.log_file,
        help='Also write logs to this file'
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    slice_parser = subparsers.add_parser("slice", help="Export one tile image per grid cell")
    slice_parser.add_argument(
        'images',
        nargs='*',
        help=f'Input images (default: {settings.input_path})'
    )
    slice_parser.add_argument(
        '--output',
        type=str,
        default=settings.output_dir,
        help='Output directory (default: %(default)s)'
    )
    slice_parser.add_argument(
        '--tile-size',
        type=int,
        default=settings.tile_size,
        help='Tile edge length in pixels (default: %(default)s)'
    )
    slice_parser.add_argument(
        '--workers',
        type=int,
        default=settings.max_workers,
        help='Worker threads (default: CPU count)'
    )
    slice_parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress console progress output'
    )

    colors_parser = subparsers.add_parser("top-colors", help="Report the most common colors")
    colors_parser.add_argument(
        'image',
        nargs='?',
        default=settings.input_path,
        help='Input image (default: %(default)s)'
    )
    colors_parser.add_argument(
        '--top',
        type=int,
        default=settings.top_colors,
        help='Number of colors to list (default: %(default)s)'
    )

    return parser


def run_slice(args: argparse.Namespace) -> int:
    try:
        config = SlicingConfig(
            tile_size=args.tile_size,
            output_dir=args.output,
            max_workers=args.workers
        )
    except ValueError as e:
        logger.error(f"Invalid slicing options: {e}")
        return 1

    engine = SlicingEngine(config)
    images = args.images or [settings.input_path]

    if len(images) == 1:
        reporter = ProgressReporter(
            bar_length=config.progress_bar_length,
            enabled=not args.quiet
        )
        engine.slice_image(images[0], reporter=reporter)
    else:
        engine.slice_image_batch(images, quiet=args.quiet)

    return 0


def run_top_colors(args: argparse.Namespace) -> int:
    try:
        analyzer = ColorFrequencyAnalyzer(top_n=args.top)
    except ValueError as e:
        logger.error(str(e))
        return 1

    colors = analyzer.analyze(args.image)
    print(analyzer.format_report(colors))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, run the command and return the exit status"""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_file)

    commands = {
        "slice": run_slice,
        "top-colors": run_top_colors,
    }

    try:
        return commands[args.command](args)
    except SlicingError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
