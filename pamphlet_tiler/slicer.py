"""Image slicer for fixed-grid, content-addressed WebP tiles."""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .errors import IndexOutOfBounds, InvalidQuality, InvalidTileSize
from .hasher import calculate_hash
from .schemas import PageInfo, TileMetadata
from .utils import decode_image, encode_webp, pad_tile

DEFAULT_QUALITY = 80

# Largest edge length the WebP format can encode
MAX_TILE_SIZE = 16383


@dataclass
class Tile:
    """One cell of the tile grid."""

    x: int  # Grid column (not pixels)
    y: int  # Grid row (not pixels)
    hash: str  # SHA-256 of data
    data: bytes = field(repr=False)  # Encoded WebP
    duplicate: bool = False  # Same hash already seen earlier in this result


@dataclass
class TileResult:
    """Tiles of one source image, in row-major order."""

    width: int
    height: int
    tile_size: int
    tiles: List[Tile] = field(default_factory=list)

    def tile_count(self) -> int:
        """Return the number of tiles."""
        return len(self.tiles)

    def get_tile_data(self, index: int) -> bytes:
        """
        Return the encoded bytes of the tile at index.

        Raises:
            IndexOutOfBounds: If index is negative or past the last tile.
        """
        if index < 0 or index >= len(self.tiles):
            raise IndexOutOfBounds(index, len(self.tiles))
        return self.tiles[index].data

    @property
    def duplicate_hashes(self) -> List[str]:
        """Hashes that occur more than once, in order of first repetition."""
        hashes: List[str] = []
        seen = set()
        for tile in self.tiles:
            if tile.duplicate and tile.hash not in seen:
                seen.add(tile.hash)
                hashes.append(tile.hash)
        return hashes

    def unique_tiles(self) -> Iterator[Tile]:
        """Yield the first tile for each distinct hash."""
        return (tile for tile in self.tiles if not tile.duplicate)

    def to_page_info(self, page: int) -> PageInfo:
        """Describe this result as a page of the metadata document."""
        return PageInfo(
            page=page,
            width=self.width,
            height=self.height,
            tiles=[TileMetadata(x=t.x, y=t.y, hash=t.hash) for t in self.tiles],
        )


def validate_tile_size(tile_size) -> int:
    if (
        isinstance(tile_size, bool)
        or not isinstance(tile_size, (int, np.integer))
        or tile_size <= 0
    ):
        raise InvalidTileSize(tile_size)
    if tile_size > MAX_TILE_SIZE:
        raise InvalidTileSize(tile_size, f"must not exceed {MAX_TILE_SIZE}")
    return int(tile_size)


def validate_quality(quality) -> int:
    if quality is None:
        return DEFAULT_QUALITY
    if (
        isinstance(quality, bool)
        or not isinstance(quality, (int, float, np.integer, np.floating))
        or not 1 <= quality <= 100
    ):
        raise InvalidQuality(quality)
    return int(quality)


class ImageSlicer:
    """Slice images into square WebP tiles addressed by content hash."""

    def __init__(
        self,
        tile_size: int = 512,
        quality: Optional[int] = None,
        lossless: bool = False,
    ):
        """
        Initialize the slicer.

        Args:
            tile_size: Edge length of each (square) tile in pixels.
            quality: WebP quality 1-100, defaults to 80.
            lossless: Encode lossless WebP instead.

        Raises:
            InvalidTileSize: If tile_size is not a positive integer.
            InvalidQuality: If quality is outside 1-100.
        """
        self.tile_size = validate_tile_size(tile_size)
        self.quality = validate_quality(quality)
        self.lossless = lossless

    def get_grid_size(self, width: int, height: int) -> Tuple[int, int]:
        """Return (tiles_x, tiles_y) for an image of the given size."""
        tiles_x = (width + self.tile_size - 1) // self.tile_size
        tiles_y = (height + self.tile_size - 1) // self.tile_size
        return tiles_x, tiles_y

    def get_tile_count(self, width: int, height: int) -> int:
        """Calculate the number of tiles for a given image size."""
        tiles_x, tiles_y = self.get_grid_size(width, height)
        return tiles_x * tiles_y

    def slice(self, image_bytes: bytes) -> TileResult:
        """
        Decode an image and cut it into tiles.

        Args:
            image_bytes: Encoded source image.

        Returns:
            TileResult with one Tile per grid cell, row-major.

        Raises:
            DecodeError: If the source cannot be decoded.
            EncodeError: If any tile fails to encode.
        """
        image = decode_image(image_bytes)
        return self.slice_array(image)

    def slice_array(self, image: np.ndarray) -> TileResult:
        """Cut an already decoded BGR/BGRA array into tiles."""
        h, w = image.shape[:2]
        size = self.tile_size
        tiles_x, tiles_y = self.get_grid_size(w, h)

        tiles = []
        seen_hashes = set()

        for ty in range(tiles_y):
            for tx in range(tiles_x):
                x = tx * size
                y = ty * size
                x_end = min(x + size, w)
                y_end = min(y + size, h)

                tile_img = image[y:y_end, x:x_end]

                # Pad if necessary (for edge tiles)
                if x_end - x < size or y_end - y < size:
                    tile_img = pad_tile(tile_img, size)

                data = encode_webp(tile_img, self.quality, self.lossless)
                tile_hash = calculate_hash(data)

                tiles.append(
                    Tile(
                        x=tx,
                        y=ty,
                        hash=tile_hash,
                        data=data,
                        duplicate=tile_hash in seen_hashes,
                    )
                )
                seen_hashes.add(tile_hash)

        return TileResult(width=w, height=h, tile_size=size, tiles=tiles)


def tile_image(
    image_bytes: bytes,
    tile_size: int,
    quality: Optional[int] = None,
    lossless: bool = False,
) -> TileResult:
    """
    Tile an encoded image.

    Args:
        image_bytes: Encoded source image (format sniffed from content).
        tile_size: Edge length of each tile in pixels.
        quality: WebP quality 1-100, defaults to 80.
        lossless: Encode lossless WebP instead.

    Returns:
        TileResult for the image.
    """
    slicer = ImageSlicer(tile_size=tile_size, quality=quality, lossless=lossless)
    return slicer.slice(image_bytes)
