"""
Axis convolution kernels for PyFastResize.

Taichi kernels that apply a packed kernel table (see
pyfastresize.filters.create_filters) to an RGBA8 bitmap along one axis
using 32-bit fixed point accumulators. Bitmaps are flat uint8 NumPy arrays;
the runtime must have been initialized with ti.init beforehand.

Author: B.G.
"""

from .horizontal import convolve_horizontally
from .vertical import convolve_vertically

__all__ = ["convolve_horizontally", "convolve_vertically"]
