"""Textured raycasting maze explorer for .cub scene files."""

__version__ = "0.1.0"
__all__ = [
    "app",
    "colors",
    "game",
    "image",
    "minimap",
    "parsing",
    "pathfinding",
    "raycast",
    "xpm",
]