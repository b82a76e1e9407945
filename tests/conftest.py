"""Shared pytest fixtures for pamphlet-tiler tests."""

from pathlib import Path

import cv2
import numpy as np
import pytest


# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def test_image_100() -> np.ndarray:
    """Create a 100x100 gradient image (every 50px tile distinct)."""
    return create_test_image(100, 100)


@pytest.fixture
def test_image_bytes(test_image_100) -> bytes:
    """100x100 gradient image encoded as PNG."""
    return image_to_bytes(test_image_100)


@pytest.fixture
def uniform_image_bytes() -> bytes:
    """100x100 single-colour image encoded as PNG."""
    img = np.zeros((100, 100, 3), dtype=np.uint8)
    img[:, :] = [128, 128, 128]  # gray
    return image_to_bytes(img)


@pytest.fixture
def sample_pages():
    """Two-tile page description as plain data."""
    return [
        {
            "page": 0,
            "width": 1000,
            "height": 1000,
            "tiles": [
                {"x": 0, "y": 0, "hash": "abc123"},
                {"x": 1, "y": 0, "hash": "def456"},
            ],
        }
    ]


def create_test_image(width: int, height: int, channels: int = 3) -> np.ndarray:
    """Helper function to create gradient test images of arbitrary size."""
    ys, xs = np.mgrid[0:height, 0:width]
    img = np.zeros((height, width, channels), dtype=np.uint8)
    img[:, :, 0] = (xs * 2) % 256
    img[:, :, 1] = (ys * 2) % 256
    img[:, :, 2] = (xs + ys) % 256
    if channels == 4:
        img[:, :, 3] = 255
    return img


def image_to_bytes(image: np.ndarray, format: str = '.png') -> bytes:
    """Encode a numpy image to bytes."""
    ok, encoded = cv2.imencode(format, image)
    assert ok, f"Failed to encode test image as {format}"
    return encoded.tobytes()


def decode_tile(data: bytes) -> np.ndarray:
    """Decode an encoded tile, keeping its alpha channel."""
    return cv2.imdecode(np.frombuffer(data, np.uint8), cv2.IMREAD_UNCHANGED)
