"""
Filter inspection CLI commands for PyFastResize.

Prints the fixed point convolution table built for one axis, which helps
when checking tap counts and weights for a given scaling.

Author: B.G.
"""

import sys

import click

import pyfastresize as pfr


@click.command()
@click.argument("src_size", type=click.IntRange(min=1))
@click.argument("dest_size", type=click.IntRange(min=1))
@click.option(
    "--quality",
    "-q",
    type=click.Choice(pfr.filters.QUALITY_NAMES),
    default="lanczos3",
    show_default=True,
    help="Resampling filter",
)
@click.option("--records", "-r", is_flag=True, help="Print every kernel record")
def filters_info(src_size, dest_size, quality, records):
    """
    Show the kernel table for resizing an axis of SRC_SIZE pixels to DEST_SIZE.

    Examples:

        # Summary for a 3x Lanczos3 downscale
        pfr-filters 300 100

        # All records of a small box upscale
        pfr-filters 4 8 -q box --records
    """
    try:
        table = pfr.filters.create_filters(quality, src_size, dest_size)
        kernel_records = pfr.filters.unpack_kernel_table(table, dest_size)
        sizes = [record.size for record in kernel_records]

        click.echo(f"Filter: {quality}, axis {src_size} -> {dest_size}")
        click.echo(f"Packed table length: {len(table)}")
        click.echo(
            f"Taps per record: min={min(sizes)}, max={max(sizes)}, "
            f"bound={pfr.filters.max_filter_size(quality, src_size, dest_size)}"
        )

        if records:
            for idx, record in enumerate(kernel_records):
                taps = " ".join(str(int(t)) for t in record.taps)
                click.echo(
                    f"{idx:5d}: shift={record.shift} size={record.size} "
                    f"sum={int(record.taps.sum())} [{taps}]"
                )

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    filters_info()
