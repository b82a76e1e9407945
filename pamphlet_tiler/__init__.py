"""Content-addressed WebP tiling of page images."""

__version__ = "0.1.0"

from .errors import (
    DecodeError,
    EncodeError,
    IndexOutOfBounds,
    InvalidQuality,
    InvalidTileSize,
    MetadataParseError,
    TilerError,
)
from .hasher import calculate_hash, short_hash
from .metadata import assemble_metadata, generate_metadata, page_info_from_result
from .schemas import Metadata, PageInfo, TileMetadata
from .slicer import (
    DEFAULT_QUALITY,
    MAX_TILE_SIZE,
    ImageSlicer,
    Tile,
    TileResult,
    tile_image,
)

__all__ = [
    "DEFAULT_QUALITY",
    "MAX_TILE_SIZE",
    "DecodeError",
    "EncodeError",
    "ImageSlicer",
    "IndexOutOfBounds",
    "InvalidQuality",
    "InvalidTileSize",
    "Metadata",
    "MetadataParseError",
    "PageInfo",
    "Tile",
    "TileMetadata",
    "TileResult",
    "TilerError",
    "assemble_metadata",
    "calculate_hash",
    "generate_metadata",
    "page_info_from_result",
    "short_hash",
    "tile_image",
]
