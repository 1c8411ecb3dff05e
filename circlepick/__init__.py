"""Three-point circle picking on an 8-bit grayscale canvas, with PGM output."""

__version__ = "0.1.0"
__all__ = ["geometry", "raster", "editor", "app"]