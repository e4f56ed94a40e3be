"""
pixel-slicer: split a raster image into solid-color tile images
"""

__version__ = "0.1.0"
