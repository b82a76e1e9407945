"""Exceptions raised by the tiling engine and metadata assembler."""


class TilerError(ValueError):
    """Base class for all tiler errors."""


class InvalidTileSize(TilerError):
    """Tile size is zero, negative, too large or not an integer."""

    def __init__(self, tile_size, constraint="must be a positive integer"):
        self.tile_size = tile_size
        super().__init__(f"Invalid tile size: {tile_size!r} ({constraint})")


class InvalidQuality(TilerError):
    """Encoding quality outside 1-100."""

    def __init__(self, quality):
        self.quality = quality
        super().__init__(f"Invalid quality: {quality!r} (must be between 1 and 100)")


class DecodeError(TilerError):
    """Source image bytes could not be decoded."""


class EncodeError(TilerError):
    """A tile could not be encoded."""


class IndexOutOfBounds(TilerError, IndexError):
    """Tile index outside the result's tile list."""

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(f"Tile index out of bounds: {index} (tile count {count})")


class MetadataParseError(TilerError):
    """Page descriptions could not be parsed into metadata."""
