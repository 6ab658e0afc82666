"""
Image manipulation module for PyFastResize.

Provides high quality RGBA8 resizing with a speed/quality trade-off selected
through four filter presets. Works on flat byte buffers as well as NumPy
arrays and Taichi fields of shape (H, W, C).

Author: B.G.
"""

from .resizing import resize, resize_image, resize_to_max_dim

__all__ = [
    "resize",
    "resize_image",
    "resize_to_max_dim",
]
