"""A turn-based artillery tank game on pygame, drawn with vector line meshes."""

__version__ = "0.1.0"