"""
Error types raised by the slicing pipeline
"""


class SlicingError(Exception):
    """Base class for fatal pipeline errors"""


class ImageDecodeError(SlicingError):
    """Source image is missing, unreadable or in an unsupported format"""


class OutputDirectoryError(SlicingError):
    """Output directory could not be created"""


class TileWriteError(SlicingError):
    """A tile image could not be encoded or written"""
