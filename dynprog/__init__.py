"""Classic dynamic-programming and sequence problems as plain functions."""

__version__ = "0.1.0"
__all__ = ["sequences", "stairs", "robbery", "grids", "progression"]