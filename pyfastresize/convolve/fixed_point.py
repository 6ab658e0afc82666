"""
Fixed point helpers shared by the convolution kernels.

Author: B.G.
"""

import taichi as ti

from .. import constants as cte


@ti.func
def clamp_to_8(value: ti.i32) -> ti.i32:
    return ti.min(ti.max(value, 0), 255)


@ti.func
def from_fixed(acc: ti.i32) -> ti.u8:
    """Bring an accumulator back to a byte (shift out the fraction, then clamp)."""
    return ti.cast(clamp_to_8(acc >> cte.FIXED_FRAC_BITS), cte.PIXEL_TYPE_TI)
