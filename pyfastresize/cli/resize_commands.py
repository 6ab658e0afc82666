"""
Image Resize CLI Commands for PyFastResize

Command line interface for resizing image files. Decoding and encoding is
done with Pillow; the resampling itself runs on the Taichi backend selected
with --arch.

Author: B.G.
"""

import sys

import click
import numpy as np
import taichi as ti
from PIL import Image

import pyfastresize as pfr

# Formats that cannot store an alpha channel
_OPAQUE_FORMATS = {".jpg", ".jpeg", ".bmp"}


def _target_size(width, height, to_width, to_height, scale, max_dim):
    """Work out the output size from the mutually exclusive size options."""
    given = [to_width is not None or to_height is not None, scale is not None, max_dim is not None]
    if sum(given) != 1:
        raise click.UsageError(
            "Specify exactly one of --width/--height, --scale or --max-dim"
        )

    if scale is not None:
        if scale <= 0:
            raise click.BadParameter("scale must be > 0", param_hint="--scale")
        return max(1, int(round(width * scale))), max(1, int(round(height * scale)))

    if max_dim is not None:
        factor = max_dim / max(width, height)
        return max(1, int(round(width * factor))), max(1, int(round(height * factor)))

    # A single dimension keeps the aspect ratio
    if to_width is None:
        to_width = max(1, int(round(width * to_height / height)))
    if to_height is None:
        to_height = max(1, int(round(height * to_width / width)))
    return to_width, to_height


@click.command()
@click.argument("input_image", type=click.Path(exists=True))
@click.argument("output_image", type=click.Path())
@click.option("--width", "-W", "to_width", type=click.IntRange(min=1), default=None,
              help="Output width in pixels")
@click.option("--height", "-H", "to_height", type=click.IntRange(min=1), default=None,
              help="Output height in pixels")
@click.option("--scale", "-s", type=float, default=None,
              help="Scaling factor (>1 upscale, <1 downscale)")
@click.option("--max-dim", "-m", type=click.IntRange(min=1), default=None,
              help="Length of the longer output side, keeping aspect ratio")
@click.option(
    "--quality",
    "-q",
    type=click.Choice(pfr.filters.QUALITY_NAMES),
    default="lanczos3",
    show_default=True,
    help="Resampling filter",
)
@click.option("--alpha", is_flag=True, help="Resample the alpha channel (slower)")
@click.option(
    "--arch",
    type=click.Choice(["cpu", "gpu"]),
    default="cpu",
    show_default=True,
    help="Taichi backend",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def image_resize(input_image, output_image, to_width, to_height, scale, max_dim,
                 quality, alpha, arch, verbose):
    """
    Resize an image file.

    Loads INPUT_IMAGE with Pillow, resizes it with the chosen filter and
    saves the result to OUTPUT_IMAGE. The output format follows the
    extension of OUTPUT_IMAGE.

    Examples:

        # Halve an image with the default Lanczos3 filter
        pfr-resize photo.png small.png --scale 0.5

        # Thumbnail whose longer side is 256 pixels
        pfr-resize photo.jpg thumb.jpg --max-dim 256 -q hamming

        # Fixed width, keeping transparency
        pfr-resize -v logo.png logo_200.png --width 200 --alpha
    """
    try:
        if verbose:
            click.echo(f"Loading image from '{input_image}'...")

        with Image.open(input_image) as img:
            rgba = np.asarray(img.convert("RGBA"), dtype=np.uint8)

        height, width = rgba.shape[:2]
        out_w, out_h = _target_size(width, height, to_width, to_height, scale, max_dim)

        if verbose:
            click.echo(
                f"Resizing {width}x{height} -> {out_w}x{out_h} "
                f"(quality={quality}, alpha={alpha}, arch={arch})..."
            )

        ti.init(arch=ti.gpu if arch == "gpu" else ti.cpu)
        result = pfr.resize_image(rgba, out_w, out_h, quality=quality, alpha=alpha)

        out_img = Image.fromarray(result)
        if output_image.lower().endswith(tuple(_OPAQUE_FORMATS)):
            out_img = out_img.convert("RGB")

        if verbose:
            click.echo(f"Saving image to '{output_image}'...")

        out_img.save(output_image)

        if verbose:
            click.echo("Resize completed successfully!")
        else:
            click.echo(f"Resized '{input_image}' -> '{output_image}' ({out_w}x{out_h})")

    except click.ClickException:
        raise

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    image_resize()
