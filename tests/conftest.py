"""
Shared fixtures: synthetic RGBA buffers and on-disk PNGs.
"""

import sys
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

# Project root on the path so tests run without an install
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bgremover.models.pixel_buffer import PixelBuffer


def make_rgba(width, height, rgb, alpha=255):
    arr = np.zeros((height, width, 4), dtype=np.uint8)
    arr[:, :, :3] = rgb
    arr[:, :, 3] = alpha
    return arr


@pytest.fixture
def solid_buffer():
    """Factory: solid_buffer((r, g, b), width=10, height=10, alpha=255)."""
    def _make(rgb, width=10, height=10, alpha=255):
        return PixelBuffer.from_array(make_rgba(width, height, rgb, alpha))
    return _make


@pytest.fixture
def split_array():
    """10x10: columns 0-4 black, columns 5-9 white."""
    arr = make_rgba(10, 10, (255, 255, 255))
    arr[:, :5, :3] = 0
    return arr


@pytest.fixture
def noisy_buffer():
    rng = np.random.default_rng(1234)
    arr = rng.integers(0, 256, size=(24, 32, 4), dtype=np.uint8)
    arr[:, :, 3] = 255
    return PixelBuffer.from_array(arr)


@pytest.fixture
def png_factory(tmp_path):
    def _write(name, rgb, size=(8, 6)):
        path = tmp_path / name
        Image.new("RGB", size, color=tuple(rgb)).save(path)
        return path
    return _write
