"""Wireframe viewer for FdF height maps, with image, event and XPM helpers."""

__version__ = "0.1.0"
__all__ = [
    "app",
    "camera",
    "colors",
    "controls",
    "events",
    "fdfmap",
    "image",
    "pixelformat",
    "render",
    "wordtab",
    "xpm",
]