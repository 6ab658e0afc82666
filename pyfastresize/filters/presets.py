"""
Quality presets for the resampling filters.

Each preset pairs a window radius (in destination pixels) with a weighting
function evaluated on the normalized distance between a source pixel centre
and the sampling point. Presets are ordered from fastest to best quality.

Author: B.G.
"""

from dataclasses import dataclass
from typing import Callable

import numpy as np

# Distances closer than this to 0 are treated as the filter centre
_EPSILON = 1.19209290e-07


def box_filter(x: np.ndarray) -> np.ndarray:
    x = np.asarray(x, dtype=np.float64)
    return np.where((x >= -0.5) & (x < 0.5), 1.0, 0.0)


def _sinc_window(x: np.ndarray, win: float, window_func) -> np.ndarray:
    x = np.asarray(x, dtype=np.float64)
    out = np.zeros_like(x)
    inside = (x > -win) & (x < win)
    centre = inside & (np.abs(x) < _EPSILON)
    lobe = inside & ~centre

    xpi = x[lobe] * np.pi
    out[lobe] = (np.sin(xpi) / xpi) * window_func(xpi)
    out[centre] = 1.0
    return out


def hamming_filter(x: np.ndarray) -> np.ndarray:
    return _sinc_window(x, 1.0, lambda xpi: 0.54 + 0.46 * np.cos(xpi / 1.0))


def lanczos2_filter(x: np.ndarray) -> np.ndarray:
    return _sinc_window(x, 2.0, lambda xpi: np.sin(xpi / 2.0) / (xpi / 2.0))


def lanczos3_filter(x: np.ndarray) -> np.ndarray:
    return _sinc_window(x, 3.0, lambda xpi: np.sin(xpi / 3.0) / (xpi / 3.0))


@dataclass(frozen=True)
class FilterPreset:
    """A filter function and its window radius."""

    name: str
    window: float
    function: Callable[[np.ndarray], np.ndarray]


FILTER_PRESETS = (
    FilterPreset("box", 0.5, box_filter),
    FilterPreset("hamming", 1.0, hamming_filter),
    FilterPreset("lanczos2", 2.0, lanczos2_filter),
    FilterPreset("lanczos3", 3.0, lanczos3_filter),
)

QUALITY_NAMES = [preset.name for preset in FILTER_PRESETS]


def resolve_quality(quality) -> int:
    """
    Convert a quality given as index or preset name to its index.

    Args:
        quality: Integer 0-3 or one of 'box', 'hamming', 'lanczos2', 'lanczos3'

    Returns:
        int: Preset index

    Raises:
        ValueError: If the quality is not a known preset
    """
    if isinstance(quality, str):
        key = quality.strip().lower()
        if key in QUALITY_NAMES:
            return QUALITY_NAMES.index(key)
        if key.isdigit():
            quality = int(key)
        else:
            raise ValueError(
                f"Quality must be one of {QUALITY_NAMES} or 0-3, got '{quality}'"
            )

    if isinstance(quality, (bool, np.bool_)) or not isinstance(
        quality, (int, np.integer)
    ):
        raise ValueError(f"Quality must be an integer 0-3, got {quality!r}")
    if not 0 <= quality < len(FILTER_PRESETS):
        raise ValueError(f"Quality must be in range 0-3, got {quality}")
    return int(quality)


def get_preset(quality) -> FilterPreset:
    """Return the FilterPreset for a quality index or name."""
    return FILTER_PRESETS[resolve_quality(quality)]
