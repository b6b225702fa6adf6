"""Flexbox layout for views on a character grid: geometry, styles, layout engine and container."""

__version__ = "0.3.0"
__all__ = ["engine", "flexbox", "geometry", "layout", "styles", "view"]