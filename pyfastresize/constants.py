"""
Global constants for PyFastResize.

Fixed-point precision used by the convolution kernels and the default
resize configuration.

Author: B.G.
"""

import taichi as ti

# Precision of fixed point filter weights
FIXED_FRAC_BITS = 14
FIXED_FRAC_VAL = 1 << FIXED_FRAC_BITS

# Storage types of the packed kernel table and of the bitmaps
FILTER_TYPE_NP = "int32"
FILTER_TYPE_TI = ti.i32
PIXEL_TYPE_TI = ti.u8

CHANNELS = 4

# Resize defaults
DEFAULT_QUALITY = 3
UNSHARP_RADIUS = 1.0
