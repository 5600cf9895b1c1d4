"""A rotating cube: 4x4 linear algebra, a perspective camera and a canvas-driven scene."""

__version__ = "0.1.0"
__all__ = ["linalg", "scene"]