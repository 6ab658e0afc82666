"""
Vertical convolution pass.

Resizes the height of an RGBA bitmap by applying a packed kernel table down
every column. Alpha is either convolved and repaired, or replaced by a fully
opaque value when the caller knows the image has no transparency.

Author: B.G.
"""

import taichi as ti

from .fixed_point import from_fixed


@ti.kernel
def convolve_vertically(
    src: ti.types.ndarray(dtype=ti.u8, ndim=1),
    dest: ti.types.ndarray(dtype=ti.u8, ndim=1),
    width: ti.i32,
    src_h: ti.i32,
    dest_h: ti.i32,
    filters: ti.types.ndarray(dtype=ti.i32, ndim=1),
    with_alpha: ti.template(),
):
    """
    Convolve each column of src with the Y filters and write it to dest.

    Args:
        src: Intermediate bitmap (width * src_h * 4 bytes)
        dest: Output bitmap (width * dest_h * 4 bytes)
        width: Width of both bitmaps (already resized)
        src_h: Source height
        dest_h: Destination height
        filters: Packed Y kernel table with dest_h records
        with_alpha: If True, resample alpha and keep it >= every colour
                    channel. If False, write 255 and skip alpha entirely.
    """
    stride = width * 4

    for src_x in range(width):
        column_offset = src_x * 4
        filter_ptr = 0

        for dest_y in range(dest_h):
            filter_shift = filters[filter_ptr]
            filter_size = filters[filter_ptr + 1]
            filter_ptr += 2

            src_ptr = column_offset + filter_shift * stride

            r = 0
            g = 0
            b = 0
            a = 0

            for tap in range(filter_size):
                filter_val = filters[filter_ptr]
                filter_ptr += 1

                r += filter_val * ti.cast(src[src_ptr], ti.i32)
                g += filter_val * ti.cast(src[src_ptr + 1], ti.i32)
                b += filter_val * ti.cast(src[src_ptr + 2], ti.i32)
                if ti.static(with_alpha):
                    a += filter_val * ti.cast(src[src_ptr + 3], ti.i32)
                src_ptr += stride

            dest_ptr = dest_y * stride + column_offset
            dest[dest_ptr] = from_fixed(r)
            dest[dest_ptr + 1] = from_fixed(g)
            dest[dest_ptr + 2] = from_fixed(b)

            if ti.static(with_alpha):
                # Alpha can't be smaller than any colour channel.
                # Compare unshifted values.
                a = ti.max(a, ti.max(r, ti.max(g, b)))
                dest[dest_ptr + 3] = from_fixed(a)
            else:
                dest[dest_ptr + 3] = ti.cast(255, ti.u8)


__all__ = ["convolve_vertically"]
