"""
Image resizing for PyFastResize.

Resizes RGBA8 bitmaps with separable fixed point convolution: the width is
resized first into an intermediate buffer, then the height into the
destination. Works on flat byte buffers (resize) and on (H, W, C) NumPy
arrays or Taichi fields (resize_image, resize_to_max_dim).

Author: B.G.
"""

import numpy as np
import taichi as ti

from .. import constants as cte
from ..convolve import convolve_horizontally, convolve_vertically
from ..filters import create_filters, resolve_quality


def _as_source_buffer(src, size):
    if isinstance(src, np.ndarray):
        data = src.reshape(-1)
    else:
        data = np.frombuffer(src, dtype=np.uint8)

    if data.dtype != np.uint8:
        raise ValueError(f"Source buffer must hold uint8 values, got {data.dtype}")
    if data.size != size:
        raise ValueError(
            f"Source buffer holds {data.size} bytes, expected width * height * 4 = {size}"
        )
    if not data.flags.c_contiguous or not data.flags.writeable:
        data = data.copy()
    return data


def _as_dest_buffer(dest, size):
    if dest is None:
        return np.zeros(size, dtype=np.uint8)

    if isinstance(dest, np.ndarray):
        # reshape of a strided array would copy and lose the writes
        if not dest.flags.c_contiguous:
            raise ValueError("Destination array must be C-contiguous")
        data = dest.reshape(-1)
    else:
        data = np.frombuffer(dest, dtype=np.uint8)

    if data.dtype != np.uint8:
        raise ValueError(f"Destination buffer must hold uint8 values, got {data.dtype}")
    if data.size != size:
        raise ValueError(
            f"Destination buffer holds {data.size} bytes, "
            f"expected to_width * to_height * 4 = {size}"
        )
    if not data.flags.writeable:
        raise ValueError("Destination buffer is read-only")
    return data


def resize(
    src,
    width: int,
    height: int,
    to_width: int,
    to_height: int,
    dest=None,
    quality=cte.DEFAULT_QUALITY,
    alpha: bool = False,
    unsharp_amount: int = 0,
    unsharp_threshold: int = 0,
    unsharp=None,
):
    """
    Resize an RGBA8 bitmap.

    The bitmap is a flat row-major sequence of R, G, B, A bytes without row
    padding. The X and Y kernel tables are built for this call only, the
    width is convolved into an intermediate (to_width x height) buffer and
    the height from there into the destination.

    Args:
        src: Source bitmap (bytes-like or uint8 NumPy array), width * height * 4 bytes
        width: Source width
        height: Source height
        to_width: Destination width
        to_height: Destination height
        dest: Optional pre-allocated destination (to_width * to_height * 4
              bytes, writable). Written in place when given.
        quality: Filter preset 0-3 or name (default: 3, lanczos3)
        alpha: If True, resample the alpha channel. If False, the output is
               fully opaque (default: False)
        unsharp_amount: Sharpening amount, 0 disables it (default: 0)
        unsharp_threshold: Sharpening threshold (default: 0)
        unsharp: Sharpening function called as
                 unsharp(dest, to_width, to_height, amount, radius, threshold);
                 it must modify dest in place. Required when unsharp_amount != 0.

    Returns:
        numpy.ndarray: Flat uint8 array of to_width * to_height * 4 bytes, or
        the dest object itself when one was given. If any dimension is < 1, an
        empty array is returned and nothing is allocated or written.

    Raises:
        ValueError: On unknown quality, buffer size mismatch or a missing
                    unsharp function

    Example:
        # Halve a 640x480 image with alpha
        out = resize(pixels, 640, 480, 320, 240, alpha=True)

        # Fast, opaque thumbnail into an existing buffer
        thumb = np.zeros(64 * 48 * 4, dtype=np.uint8)
        resize(pixels, 640, 480, 64, 48, dest=thumb, quality="hamming")
    """
    if width < 1 or height < 1 or to_width < 1 or to_height < 1:
        return np.empty(0, dtype=np.uint8)

    quality = resolve_quality(quality)
    unsharp_amount = int(unsharp_amount)
    unsharp_threshold = int(unsharp_threshold)
    if unsharp_amount and unsharp is None:
        raise ValueError("unsharp_amount requires an unsharp function")

    src_data = _as_source_buffer(src, width * height * cte.CHANNELS)
    dest_data = _as_dest_buffer(dest, to_width * to_height * cte.CHANNELS)

    filters_x = create_filters(quality, width, to_width)
    filters_y = create_filters(quality, height, to_height)

    # Width resized, height untouched
    tmp = np.zeros(to_width * height * cte.CHANNELS, dtype=np.uint8)

    convolve_horizontally(src_data, tmp, width, height, to_width, filters_x)
    convolve_vertically(
        tmp, dest_data, to_width, height, to_height, filters_y, bool(alpha)
    )

    if unsharp_amount:
        unsharp(
            dest_data,
            to_width,
            to_height,
            unsharp_amount,
            cte.UNSHARP_RADIUS,
            unsharp_threshold,
        )

    return dest if dest is not None else dest_data


def _image_to_numpy(image):
    if isinstance(image, np.ndarray):
        data = image
    elif hasattr(image, "to_numpy"):
        data = image.to_numpy()
    else:
        raise TypeError("image must be a numpy array or Taichi field")

    if data.ndim != 3:
        raise ValueError(f"Image must have shape (height, width, channels), got {data.shape}")
    if data.shape[2] not in (3, 4):
        raise ValueError(f"Image must have 3 or 4 channels, got {data.shape[2]}")
    if data.dtype != np.uint8:
        data = np.clip(data, 0, 255).astype(np.uint8)
    return data


def resize_image(
    image,
    to_width: int,
    to_height: int,
    quality=cte.DEFAULT_QUALITY,
    alpha: bool | None = None,
    return_field: bool = False,
    **kwargs,
):
    """
    Resize an RGB or RGBA image array.

    Args:
        image: Image as numpy array or Taichi field of shape (H, W, 3) or (H, W, 4)
        to_width: Destination width (>= 1)
        to_height: Destination height (>= 1)
        quality: Filter preset 0-3 or name (default: 3)
        alpha: Resample the alpha channel. None resamples it only when the
               image has a non-opaque alpha channel (default: None)
        return_field: If True, return a Taichi u8 field instead of a numpy array
        **kwargs: Forwarded to resize (unsharp_amount, unsharp_threshold, unsharp)

    Returns:
        numpy.ndarray or taichi.Field: Image of shape (to_height, to_width, C)
        with the same channel count as the input

    Example:
        thumb = resize_image(rgba, 128, 96, quality="lanczos2")
    """
    if to_width < 1 or to_height < 1:
        raise ValueError(
            f"Target size must be >= 1, got ({to_width}, {to_height})"
        )

    data = _image_to_numpy(image)
    height, width, channels = data.shape

    if channels == 3:
        rgba = np.empty((height, width, cte.CHANNELS), dtype=np.uint8)
        rgba[..., :3] = data
        rgba[..., 3] = 255
    else:
        rgba = data

    if alpha is None:
        alpha = channels == 4 and bool(np.any(rgba[..., 3] != 255))

    flat = resize(
        np.ascontiguousarray(rgba),
        width,
        height,
        to_width,
        to_height,
        quality=quality,
        alpha=alpha,
        **kwargs,
    )
    result = flat.reshape(to_height, to_width, cte.CHANNELS)[..., :channels]
    result = np.ascontiguousarray(result)

    if return_field:
        field = ti.field(dtype=cte.PIXEL_TYPE_TI, shape=result.shape)
        field.from_numpy(result)
        return field
    return result


def resize_to_max_dim(image, max_dim: int, **kwargs):
    """
    Resize an image so that its longer side equals max_dim.

    The aspect ratio is kept; each side is rounded and at least 1 pixel.

    Args:
        image: Image as numpy array or Taichi field of shape (H, W, 3|4)
        max_dim: Target length of the longer side (>= 1)
        **kwargs: Forwarded to resize_image

    Returns:
        numpy.ndarray or taichi.Field: Resized image
    """
    if max_dim < 1:
        raise ValueError("max_dim must be >= 1")

    height, width = image.shape[0], image.shape[1]
    scale = max_dim / max(width, height)
    to_width = max(1, int(round(width * scale)))
    to_height = max(1, int(round(height * scale)))
    return resize_image(image, to_width, to_height, **kwargs)


__all__ = ["resize", "resize_image", "resize_to_max_dim"]
