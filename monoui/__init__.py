"""Form-based menu engine and monochrome drawing primitives on an in-memory canvas."""

__version__ = "0.1.0"
__all__ = ["fds", "parsing", "ui", "canvas", "shapes", "bitmap", "button"]