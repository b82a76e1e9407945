"""Image codec helpers for the tiling engine."""

import cv2
import numpy as np

from .errors import DecodeError, EncodeError

# Transparent white in BGRA channel order
PADDING_COLOR = (255, 255, 255, 0)

# OpenCV switches the WebP encoder to lossless above 100
LOSSLESS_QUALITY = 101


def decode_image(image_bytes: bytes) -> np.ndarray:
    """
    Decode image bytes into an 8-bit BGR or BGRA array.

    The container format is sniffed from the content, so no filename or
    MIME type is needed.

    Args:
        image_bytes: Encoded image (JPEG, PNG, WebP, BMP, TIFF, ...).

    Returns:
        Array of shape (H, W, 3) or (H, W, 4).

    Raises:
        DecodeError: If the bytes are empty or not a decodable image.
    """
    if not image_bytes:
        raise DecodeError("Failed to decode image: empty input")

    buf = np.frombuffer(image_bytes, np.uint8)
    try:
        image = cv2.imdecode(buf, cv2.IMREAD_UNCHANGED)
    except cv2.error as e:
        raise DecodeError(f"Failed to decode image: {e}") from e

    if image is None:
        raise DecodeError(
            f"Failed to decode image: unrecognized or corrupt image data "
            f"({len(image_bytes)} bytes)"
        )

    if image.dtype == np.uint16:
        image = (image >> 8).astype(np.uint8)

    if image.ndim == 2 or image.shape[2] == 1:
        image = cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)

    return image


def pad_tile(tile: np.ndarray, tile_size: int) -> np.ndarray:
    """
    Place a cropped edge tile at the top-left of a transparent square canvas.

    Args:
        tile: Cropped BGR or BGRA region, at most tile_size on each side.
        tile_size: Edge length of the output canvas.

    Returns:
        BGRA array of shape (tile_size, tile_size, 4).
    """
    h, w = tile.shape[:2]
    if tile.shape[2] == 3:
        tile = cv2.cvtColor(tile, cv2.COLOR_BGR2BGRA)

    padded = np.empty((tile_size, tile_size, 4), dtype=tile.dtype)
    padded[:, :] = PADDING_COLOR
    padded[:h, :w] = tile
    return padded


def encode_webp(image: np.ndarray, quality: int, lossless: bool = False) -> bytes:
    """
    Encode an image as WebP.

    Args:
        image: BGR or BGRA array.
        quality: Lossy quality, 1-100.
        lossless: Use lossless compression (quality is ignored).

    Returns:
        Encoded WebP bytes.

    Raises:
        EncodeError: If OpenCV rejects the image or produces no output.
    """
    params = [cv2.IMWRITE_WEBP_QUALITY, LOSSLESS_QUALITY if lossless else int(quality)]
    try:
        ok, encoded = cv2.imencode(".webp", np.ascontiguousarray(image), params)
    except cv2.error as e:
        raise EncodeError(f"Failed to encode WebP: {e}") from e

    if not ok:
        raise EncodeError("Failed to encode WebP: encoder returned no data")
    return encoded.tobytes()
