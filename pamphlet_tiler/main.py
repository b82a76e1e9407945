"""FastAPI service exposing the tiling engine."""

import base64
import logging
import sys
import time

from fastapi import FastAPI, File, Form, HTTPException, UploadFile

from .config import settings

# Configure logging to output to stderr; child loggers such as
# pamphlet_tiler.main inherit this configuration under uvicorn
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(levelname)s:%(name)s:%(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("pamphlet_tiler")

from . import __version__
from .errors import TilerError
from .hasher import calculate_hash, short_hash
from .metadata import assemble_metadata
from .schemas import (
    HashResponse,
    HealthResponse,
    Metadata,
    MetadataRequest,
    TileInfo,
    TileResponse,
)
from .slicer import MAX_TILE_SIZE, ImageSlicer


app = FastAPI(
    title="Pamphlet Tiler API",
    description="Split page images into content-addressed WebP tiles",
    version=__version__,
)


async def _read_upload(file: UploadFile, allow_empty: bool = False) -> bytes:
    # One byte past the limit is enough to tell an oversized upload apart
    limit = settings.max_upload_bytes
    contents = await file.read(limit + 1)
    if len(contents) > limit:
        raise HTTPException(
            status_code=413,
            detail=f"Upload too large: more than {limit} bytes",
        )
    if len(contents) == 0 and not allow_empty:
        raise HTTPException(status_code=400, detail="Invalid image file")
    return contents


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        tile_size=settings.tile_size,
        quality=settings.quality,
    )


@app.post("/tile", response_model=TileResponse)
async def tile(
    file: UploadFile = File(..., description="Page image to tile"),
    tile_size: int = Form(
        default=settings.tile_size,
        ge=1,
        le=MAX_TILE_SIZE,
        description="Tile edge length in pixels",
    ),
    quality: int = Form(
        default=settings.quality,
        ge=1,
        le=100,
        description="WebP quality",
    ),
    lossless: bool = Form(default=settings.lossless, description="Encode lossless WebP"),
    include_data: bool = Form(default=False, description="Return base64 tile bytes"),
):
    """
    Tile an uploaded page image.

    Returns grid coordinates and content hash of every tile, row-major.
    """
    start_time = time.perf_counter()

    contents = await _read_upload(file)
    logger.debug(f"Received image: {len(contents)} bytes")

    try:
        slicer = ImageSlicer(tile_size=tile_size, quality=quality, lossless=lossless)
        result = slicer.slice(contents)
    except TilerError as e:
        logger.debug(f"Tiling failed: {e}")
        raise HTTPException(status_code=400, detail=str(e)) from e

    duplicates = result.duplicate_hashes
    logger.debug(
        f"Tiled {result.width}x{result.height} into {result.tile_count()} tiles "
        f"(tile_size={tile_size}, quality={quality}, lossless={lossless}), "
        f"{len(duplicates)} repeated hashes"
    )

    tiles = [
        TileInfo(
            x=t.x,
            y=t.y,
            hash=t.hash,
            duplicate=t.duplicate,
            data=base64.b64encode(t.data).decode("ascii") if include_data else None,
        )
        for t in result.tiles
    ]

    elapsed_ms = (time.perf_counter() - start_time) * 1000

    return TileResponse(
        width=result.width,
        height=result.height,
        tile_size=result.tile_size,
        tile_count=result.tile_count(),
        tiles=tiles,
        duplicate_hashes=duplicates,
        processing_time_ms=elapsed_ms,
    )


@app.post("/metadata", response_model=Metadata)
async def metadata(request: MetadataRequest):
    """Assemble the metadata document for a set of tiled pages."""
    try:
        document = assemble_metadata(request.pages, request.tile_size)
    except TilerError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    logger.debug(
        f"Assembled metadata version {document.version}: "
        f"{len(document.pages)} pages, tile_size={document.tile_size}"
    )
    return document


@app.post("/hash", response_model=HashResponse)
async def hash_file(file: UploadFile = File(..., description="Bytes to hash")):
    """Compute the content hash used for tile filenames."""
    contents = await _read_upload(file, allow_empty=True)
    return HashResponse(
        hash=calculate_hash(contents),
        short_hash=short_hash(contents),
        size=len(contents),
    )
