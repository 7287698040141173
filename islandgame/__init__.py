"""A small top-down island game: timer, window, texture cache, spritesheets and frame animations."""

__version__ = "0.1.0"
__all__ = ["timer", "window", "textures", "animation", "app"]