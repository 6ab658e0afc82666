"""
Horizontal convolution pass.

Resizes the width of an RGBA bitmap by applying a packed kernel table to
every row. All four channels, alpha included, are convolved.

Author: B.G.
"""

import taichi as ti

from .fixed_point import from_fixed


@ti.kernel
def convolve_horizontally(
    src: ti.types.ndarray(dtype=ti.u8, ndim=1),
    dest: ti.types.ndarray(dtype=ti.u8, ndim=1),
    src_w: ti.i32,
    src_h: ti.i32,
    dest_w: ti.i32,
    filters: ti.types.ndarray(dtype=ti.i32, ndim=1),
):
    """
    Convolve each row of src with the X filters and write it to dest.

    Rows are processed in parallel; within a row the filter table is read
    sequentially, one record per destination pixel.

    Args:
        src: Source bitmap (src_w * src_h * 4 bytes)
        dest: Output bitmap (dest_w * src_h * 4 bytes)
        src_w: Source width
        src_h: Source height (unchanged by this pass)
        dest_w: Destination width
        filters: Packed X kernel table with dest_w records
    """
    for src_y in range(src_h):
        src_offset = src_y * src_w * 4
        dest_offset = src_y * dest_w * 4
        filter_ptr = 0

        for dest_x in range(dest_w):
            # Record header of the current output pixel
            filter_shift = filters[filter_ptr]
            filter_size = filters[filter_ptr + 1]
            filter_ptr += 2

            src_ptr = src_offset + filter_shift * 4

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
                a += filter_val * ti.cast(src[src_ptr + 3], ti.i32)
                src_ptr += 4

            dest_ptr = dest_offset + dest_x * 4
            dest[dest_ptr] = from_fixed(r)
            dest[dest_ptr + 1] = from_fixed(g)
            dest[dest_ptr + 2] = from_fixed(b)
            dest[dest_ptr + 3] = from_fixed(a)


__all__ = ["convolve_horizontally"]
