"""A minimal OpenGL engine: window, keyboard input, scene clearing and 4x4 matrix helpers."""

__version__ = "0.1.0"
__all__ = ["application", "graphics", "input", "matrix", "system"]