"""
Resampling filter module for PyFastResize.

Provides the quality presets (box, hamming, lanczos2, lanczos3) and the
builder that turns a preset and an axis scaling into a packed table of fixed
point convolution weights, one record per destination pixel.

Usage:
    import pyfastresize as pfr

    # Packed table for a 640 -> 320 axis using Lanczos3
    table = pfr.filters.create_filters(3, 640, 320)

    # Same weights as explicit records
    records = pfr.filters.build_kernel_records("lanczos3", 640, 320)

Author: B.G.
"""

from .presets import (
    FILTER_PRESETS,
    QUALITY_NAMES,
    FilterPreset,
    get_preset,
    resolve_quality,
)
from .kernel_builder import (
    KernelRecord,
    build_kernel_records,
    create_filters,
    max_filter_size,
    pack_kernel_records,
    unpack_kernel_table,
)

__all__ = [
    "FILTER_PRESETS",
    "QUALITY_NAMES",
    "FilterPreset",
    "get_preset",
    "resolve_quality",
    "KernelRecord",
    "build_kernel_records",
    "create_filters",
    "max_filter_size",
    "pack_kernel_records",
    "unpack_kernel_table",
]
