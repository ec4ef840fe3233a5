"""Interactive command-line editor for slide documents of rectangles, ellipses and groups."""

__version__ = "0.1.0"