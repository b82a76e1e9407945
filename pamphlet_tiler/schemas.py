"""Pydantic models for the metadata document and API request/response schemas."""

from typing import List, Optional
from pydantic import BaseModel, Field

HASH_PATTERN = r"^[0-9a-f]+$"


class TileMetadata(BaseModel):
    """Grid position and content hash of one tile (no pixel data)."""

    x: int = Field(..., ge=0, description="Grid column")
    y: int = Field(..., ge=0, description="Grid row")
    hash: str = Field(..., min_length=1, pattern=HASH_PATTERN, description="Hex content hash")


class PageInfo(BaseModel):
    """Tile grid of one page."""

    page: int = Field(..., ge=0, description="Page number, starting at 0")
    width: int = Field(..., gt=0, description="Page width in pixels")
    height: int = Field(..., gt=0, description="Page height in pixels")
    tiles: List[TileMetadata] = Field(default_factory=list)


class Metadata(BaseModel):
    """Aggregate description of all pages' tile grids."""

    version: int = Field(..., description="Generation timestamp (epoch milliseconds)")
    tile_size: int = Field(..., gt=0)
    pages: List[PageInfo]


class MetadataRequest(BaseModel):
    """Request body for metadata assembly."""

    tile_size: int = Field(..., gt=0)
    pages: List[PageInfo]


class TileInfo(BaseModel):
    """Single tile in a tiling response."""

    x: int
    y: int
    hash: str
    duplicate: bool = Field(False, description="Hash already seen earlier in this image")
    data: Optional[str] = Field(None, description="Base64 encoded WebP, when requested")


class TileResponse(BaseModel):
    """Response model for tiling endpoint."""

    width: int
    height: int
    tile_size: int
    tile_count: int = Field(..., description="Number of tiles produced")
    tiles: List[TileInfo]
    duplicate_hashes: List[str]
    processing_time_ms: float


class HashResponse(BaseModel):
    """Response model for hash endpoint."""

    hash: str
    short_hash: str
    size: int


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    status: str
    version: str
    tile_size: int
    quality: int
