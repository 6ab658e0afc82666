"""
Pytest configuration and fixtures for PyFastResize test suite.

This file contains shared fixtures, test configuration, and utilities
used across the test suite.
"""
import os
import sys
import pytest
import numpy as np


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    for marker in ("unit", "integration", "importtest", "slow", "gpu"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers."""
    for item in items:
        if "gpu" in item.keywords:
            item.add_marker("slow")

        # Mark import tests for easy selection
        if "import" in item.name.lower() or "test_imports.py" in item.nodeid:
            item.add_marker("importtest")


@pytest.fixture(scope="session")
def random_rgba_image():
    """Provide a reproducible random RGBA image with valid alpha."""
    rng = np.random.default_rng(42)
    height, width = 24, 32
    rgba = rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
    # Keep colour <= alpha, as for premultiplied data
    rgba[..., :3] = np.minimum(rgba[..., :3], rgba[..., 3:4])
    return rgba


@pytest.fixture(scope="session")
def gradient_rgb_image():
    """Provide a smooth opaque RGB gradient."""
    height, width = 30, 40
    x = np.linspace(0, 255, width)
    y = np.linspace(0, 255, height)
    X, Y = np.meshgrid(x, y)
    rgb = np.stack([X, Y, (X + Y) / 2], axis=-1)
    return rgb.astype(np.uint8)


@pytest.fixture
def skip_if_no_taichi():
    """Skip test if Taichi is not available or fails to initialize."""
    try:
        import taichi as ti
        ti.init(arch=ti.cpu, offline_cache=False)
        return True
    except Exception:
        pytest.skip("Taichi not available or initialization failed")


class ImageFactory:
    """Helper class for building test bitmaps."""

    @staticmethod
    def solid(width, height, color):
        """Flat RGBA8 buffer filled with one colour."""
        return np.tile(np.asarray(color, dtype=np.uint8), width * height)

    @staticmethod
    def checkerboard(width, height, cell=1):
        """Opaque black/white checkerboard as a flat RGBA8 buffer."""
        j, i = np.mgrid[0:height, 0:width]
        on = ((i // cell + j // cell) % 2).astype(np.uint8) * 255
        rgba = np.stack([on, on, on, np.full_like(on, 255)], axis=-1)
        return rgba.reshape(-1)

    @staticmethod
    def random(width, height, seed=0):
        """Random RGBA8 buffer with arbitrary alpha."""
        rng = np.random.default_rng(seed)
        return rng.integers(0, 256, size=width * height * 4, dtype=np.uint8)


@pytest.fixture
def image_factory():
    """Provide access to test bitmap creation utilities."""
    return ImageFactory()
