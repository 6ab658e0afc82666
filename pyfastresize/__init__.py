"""
PyFastResize: fast, quality-tunable image resampling with Taichi.

Images are resized with separable convolution (width first, then height)
using fixed point weights from a windowed-sinc family filter:

- quality 0: box
- quality 1: hamming
- quality 2: lanczos, window 2
- quality 3: lanczos, window 3 (default)

Usage:
    import taichi as ti
    import pyfastresize as pfr

    ti.init(arch=ti.cpu)

    out = pfr.resize(pixels, 640, 480, 320, 240, quality=3, alpha=True)

Author: B.G.
"""

__version__ = "0.0.1"

from . import constants
from . import filters
from . import convolve
from . import imagemanip
from .imagemanip import resize, resize_image, resize_to_max_dim

__all__ = [
    "constants",
    "filters",
    "convolve",
    "imagemanip",
    "resize",
    "resize_image",
    "resize_to_max_dim",
]
