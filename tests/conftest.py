"""Shared fixtures for the filter tests."""

import numpy as np
import pytest

from model.pixel_buffer import PixelBuffer


def ppm_bytes(width: int, height: int, raster: bytes, header: bytes | None = None) -> bytes:
    """Build the bytes of a P6 file."""
    if header is None:
        header = b"P6\n%d %d\n255\n" % (width, height)
    return header + raster


@pytest.fixture
def random_image() -> PixelBuffer:
    rng = np.random.default_rng(1234)
    return PixelBuffer(rng.integers(0, 256, size=(13, 9, 3), dtype=np.uint8))


@pytest.fixture
def write_ppm(tmp_path):
    """Write a P6 file into tmp_path and return its path."""
    def _write(name: str, width: int, height: int, raster: bytes, header: bytes | None = None):
        path = tmp_path / name
        path.write_bytes(ppm_bytes(width, height, raster, header))
        return path
    return _write
