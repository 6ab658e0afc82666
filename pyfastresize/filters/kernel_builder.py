"""
Convolution kernel tables for one image axis.

For every destination pixel along an axis, a set of fixed point weights is
computed over the source pixels that fall inside the filter window. The
records are then packed into a flat integer table:

    [shift, length, w0, w1, ..., shift2, length2, w0, ...]

- shift: index of the first contributing source pixel
- length: number of weights that follow
- w*: signed weights with FIXED_FRAC_BITS fractional bits

The table is read with a running cursor, one record per destination pixel,
in the same order it was written.

Author: B.G.
"""

import math
from typing import NamedTuple

import numpy as np

from .. import constants as cte
from .presets import get_preset


class KernelRecord(NamedTuple):
    """Weights of a single destination pixel along one axis."""

    shift: int
    taps: np.ndarray

    @property
    def size(self) -> int:
        return len(self.taps)


def _to_fixed_point(values):
    return np.floor(values * cte.FIXED_FRAC_VAL).astype(np.int64)


def _check_sizes(src_size, dest_size):
    if src_size < 1 or dest_size < 1:
        raise ValueError(
            f"Axis sizes must be >= 1, got src_size={src_size}, dest_size={dest_size}"
        )


def max_filter_size(quality, src_size: int, dest_size: int) -> int:
    """
    Upper bound on the number of taps per record for an axis.

    Args:
        quality: Preset index (0-3) or name
        src_size: Source axis length
        dest_size: Destination axis length

    Returns:
        int: Maximum taps a record can hold
    """
    _check_sizes(src_size, dest_size)
    preset = get_preset(quality)
    scale_clamped = min(1.0, dest_size / src_size)
    return int(math.floor((preset.window / scale_clamped + 1) * 2))


def build_kernel_records(quality, src_size: int, dest_size: int) -> list:
    """
    Compute the fixed point filter of every destination pixel on one axis.

    On downscale the window is widened by the scale ratio so that every
    source pixel contributes (anti-aliasing); on upscale it keeps the preset
    radius. Weights are normalized, quantized with floor and the rounding
    residual is added to the central tap, so each record sums to exactly
    FIXED_FRAC_VAL. Zero weights at both ends are trimmed.

    Args:
        quality: Preset index (0-3) or name ('box', 'hamming', 'lanczos2', 'lanczos3')
        src_size: Source axis length (>= 1)
        dest_size: Destination axis length (>= 1)

    Returns:
        list[KernelRecord]: One record per destination pixel. A record whose
        weights all vanish is returned as KernelRecord(0, <empty>).

    Raises:
        ValueError: If quality is unknown or a size is < 1
    """
    _check_sizes(src_size, dest_size)
    preset = get_preset(quality)

    scale = dest_size / src_size
    scale_inverted = 1.0 / scale
    scale_clamped = min(1.0, scale)

    # Filter window (averaging interval), scaled to src image
    src_window = preset.window / scale_clamped

    records = []
    for dest_pixel in range(dest_size):
        # Scaling is done relative to the pixel centre
        src_pixel = (dest_pixel + 0.5) * scale_inverted

        src_first = max(0, int(math.floor(src_pixel - src_window)))
        src_last = min(src_size - 1, int(math.ceil(src_pixel + src_window)))

        positions = np.arange(src_first, src_last + 1, dtype=np.float64)
        float_filter = preset.function((positions + 0.5 - src_pixel) * scale_clamped)
        total = float_filter.sum()

        if total == 0.0:
            records.append(KernelRecord(0, np.zeros(0, dtype=cte.FILTER_TYPE_NP)))
            continue

        fxp_filter = _to_fixed_point(float_filter / total)

        # Compensate normalization error to avoid brightness drift
        fxp_filter[len(fxp_filter) >> 1] += cte.FIXED_FRAC_VAL - int(fxp_filter.sum())

        non_zero = np.flatnonzero(fxp_filter)
        if len(non_zero) == 0:
            records.append(KernelRecord(0, np.zeros(0, dtype=cte.FILTER_TYPE_NP)))
            continue

        left, right = int(non_zero[0]), int(non_zero[-1])
        records.append(
            KernelRecord(
                src_first + left,
                fxp_filter[left : right + 1].astype(cte.FILTER_TYPE_NP),
            )
        )

    return records


def pack_kernel_records(records) -> np.ndarray:
    """
    Flatten kernel records into [shift, length, taps...] form.

    Args:
        records: Sequence of KernelRecord

    Returns:
        numpy.ndarray: 1D int32 packed table
    """
    packed_size = sum(2 + record.size for record in records)
    packed = np.zeros(packed_size, dtype=cte.FILTER_TYPE_NP)

    ptr = 0
    for record in records:
        packed[ptr] = record.shift
        packed[ptr + 1] = record.size
        ptr += 2
        packed[ptr : ptr + record.size] = record.taps
        ptr += record.size

    return packed


def unpack_kernel_table(table, dest_size: int) -> list:
    """
    Read dest_size records back from a packed table.

    Args:
        table: Packed table as produced by create_filters
        dest_size: Number of records to read

    Returns:
        list[KernelRecord]: Records in table order

    Raises:
        ValueError: If the table ends before dest_size records are read
    """
    table = np.asarray(table)
    records = []
    ptr = 0
    for _ in range(dest_size):
        if ptr + 2 > len(table):
            raise ValueError("Packed kernel table is truncated")
        shift = int(table[ptr])
        size = int(table[ptr + 1])
        ptr += 2
        if ptr + size > len(table):
            raise ValueError("Packed kernel table is truncated")
        records.append(KernelRecord(shift, table[ptr : ptr + size].copy()))
        ptr += size
    return records


def create_filters(quality, src_size: int, dest_size: int) -> np.ndarray:
    """
    Build the packed convolution table for one axis.

    Args:
        quality: Preset index (0-3) or name
        src_size: Source axis length (>= 1)
        dest_size: Destination axis length (>= 1)

    Returns:
        numpy.ndarray: 1D int32 packed table with dest_size records

    Example:
        filters_x = create_filters(3, 640, 320)
        filters_y = create_filters(3, 480, 240)
    """
    return pack_kernel_records(build_kernel_records(quality, src_size, dest_size))


__all__ = [
    "KernelRecord",
    "build_kernel_records",
    "pack_kernel_records",
    "unpack_kernel_table",
    "create_filters",
    "max_filter_size",
]
