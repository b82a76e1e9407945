"""Assembly of the metadata document describing all pages of a pamphlet."""

import time
from typing import Iterable, List, Mapping, Union

from pydantic import TypeAdapter, ValidationError

from .errors import MetadataParseError
from .schemas import Metadata, PageInfo
from .slicer import TileResult, validate_tile_size

_pages_adapter = TypeAdapter(List[PageInfo])


def current_version() -> int:
    """Return the current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


def page_info_from_result(page: int, result: TileResult) -> PageInfo:
    """Build the data-only page description for a tiled page."""
    return result.to_page_info(page)


def assemble_metadata(
    pages: Iterable[Union[PageInfo, Mapping]],
    tile_size: int,
) -> Metadata:
    """
    Combine per-page tile descriptions into one metadata document.

    Args:
        pages: PageInfo models, or mappings with the same shape.
        tile_size: Tile edge length used for every page.

    Returns:
        Metadata stamped with the current time as its version.

    Raises:
        InvalidTileSize: If tile_size is not a positive integer.
        MetadataParseError: If a page does not match the PageInfo shape.
    """
    validate_tile_size(tile_size)
    try:
        parsed = _pages_adapter.validate_python(pages)
    except ValidationError as e:
        raise MetadataParseError(f"Invalid page data: {e}") from e

    return Metadata(version=current_version(), tile_size=tile_size, pages=parsed)


def generate_metadata(pages_json: Union[str, bytes], tile_size: int) -> str:
    """
    Build metadata.json from a JSON array of pages.

    Args:
        pages_json: JSON array of {page, width, height, tiles: [{x, y, hash}]}.
        tile_size: Tile edge length used for every page.

    Returns:
        The metadata document, pretty-printed with fixed key order.

    Raises:
        MetadataParseError: If pages_json is not valid JSON of the right shape.
    """
    try:
        pages = _pages_adapter.validate_json(pages_json)
    except ValidationError as e:
        raise MetadataParseError(f"Failed to parse pages: {e}") from e

    return assemble_metadata(pages, tile_size).model_dump_json(indent=2)
