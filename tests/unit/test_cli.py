"""Unit tests for CLI functionality."""

import numpy as np
import pytest
from click.testing import CliRunner


class TestCLIResizeCommands:
    """Test CLI image resize commands."""

    @pytest.fixture
    def runner(self):
        """Provide Click test runner."""
        return CliRunner()

    @pytest.fixture
    def png_path(self, tmp_path):
        """Write a small RGBA PNG and return its path."""
        from PIL import Image

        rgba = np.zeros((12, 16, 4), dtype=np.uint8)
        rgba[..., 0] = 200
        rgba[..., 3] = 255
        path = tmp_path / "in.png"
        Image.fromarray(rgba).save(path)
        return path

    @pytest.mark.unit
    def test_image_resize_help(self, runner):
        """Test that image_resize command shows help."""
        from pyfastresize.cli.resize_commands import image_resize

        result = runner.invoke(image_resize, ["--help"])
        assert result.exit_code == 0
        assert "Resize an image file" in result.output

    @pytest.mark.unit
    def test_image_resize_requires_args(self, runner):
        """Test that image_resize requires arguments."""
        from pyfastresize.cli.resize_commands import image_resize

        result = runner.invoke(image_resize, [])
        assert result.exit_code != 0

    @pytest.mark.unit
    def test_image_resize_needs_one_size_option(self, runner, png_path, tmp_path):
        from pyfastresize.cli.resize_commands import image_resize

        out = tmp_path / "out.png"
        result = runner.invoke(image_resize, [str(png_path), str(out)])
        assert result.exit_code == 2

        result = runner.invoke(
            image_resize, [str(png_path), str(out), "--scale", "0.5", "--max-dim", "4"]
        )
        assert result.exit_code == 2

    @pytest.mark.unit
    def test_image_resize_scale(self, runner, png_path, tmp_path):
        from PIL import Image

        from pyfastresize.cli.resize_commands import image_resize

        out = tmp_path / "out.png"
        result = runner.invoke(
            image_resize, [str(png_path), str(out), "--scale", "0.5", "-q", "hamming", "-v"]
        )
        assert result.exit_code == 0, result.output
        assert "Resize completed successfully!" in result.output

        with Image.open(out) as img:
            assert img.size == (8, 6)
            pixels = np.asarray(img.convert("RGBA"))
        assert np.all(pixels == [200, 0, 0, 255])

    @pytest.mark.unit
    def test_image_resize_width_keeps_aspect(self, runner, png_path, tmp_path):
        from PIL import Image

        from pyfastresize.cli.resize_commands import image_resize

        out = tmp_path / "out.jpg"
        result = runner.invoke(image_resize, [str(png_path), str(out), "--width", "32"])
        assert result.exit_code == 0, result.output

        with Image.open(out) as img:
            assert img.size == (32, 24)
            assert img.mode == "RGB"

    @pytest.mark.unit
    def test_image_resize_max_dim(self, runner, png_path, tmp_path):
        from PIL import Image

        from pyfastresize.cli.resize_commands import image_resize

        out = tmp_path / "out.png"
        result = runner.invoke(
            image_resize, [str(png_path), str(out), "--max-dim", "4", "--alpha"]
        )
        assert result.exit_code == 0, result.output

        with Image.open(out) as img:
            assert img.size == (4, 3)

    @pytest.mark.unit
    def test_image_resize_bad_input(self, runner, tmp_path):
        from pyfastresize.cli.resize_commands import image_resize

        bad = tmp_path / "bad.png"
        bad.write_bytes(b"not an image")
        result = runner.invoke(
            image_resize, [str(bad), str(tmp_path / "out.png"), "--scale", "2"]
        )
        assert result.exit_code == 1
        assert "Error:" in result.output


class TestCLIFilterCommands:
    """Test CLI kernel table inspection."""

    @pytest.fixture
    def runner(self):
        return CliRunner()

    @pytest.mark.unit
    def test_filters_info_summary(self, runner):
        from pyfastresize.cli.filter_commands import filters_info

        result = runner.invoke(filters_info, ["4", "2", "-q", "box"])
        assert result.exit_code == 0
        assert "Packed table length: 8" in result.output
        assert "Taps per record: min=2, max=2" in result.output

    @pytest.mark.unit
    def test_filters_info_records(self, runner):
        from pyfastresize.cli.filter_commands import filters_info

        result = runner.invoke(filters_info, ["4", "2", "-q", "box", "--records"])
        assert result.exit_code == 0
        assert "shift=2 size=2 sum=16384 [8192 8192]" in result.output

    @pytest.mark.unit
    def test_filters_info_rejects_zero(self, runner):
        from pyfastresize.cli.filter_commands import filters_info

        result = runner.invoke(filters_info, ["0", "2"])
        assert result.exit_code != 0
