#!/usr/bin/env python3
"""
Tile pamphlet page images and build metadata.json.

Pages are numbered from 0 in argument order. Tile bytes are not written;
the output is the metadata document describing every page's tile grid.

Usage:
    python scripts/tile_pages.py \
        data/pages/page-0.jpg data/pages/page-1.png \
        --tile-size 512 \
        --quality 80 \
        --output data/metadata.json
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from tqdm import tqdm

from pamphlet_tiler import (
    PageInfo,
    TilerError,
    assemble_metadata,
    tile_image,
)
from pamphlet_tiler.config import settings


def tile_page(
    image_path: Path,
    page: int,
    tile_size: int,
    quality: int,
    lossless: bool = False,
) -> Tuple[PageInfo, int]:
    """Tile a single page image.

    Args:
        image_path: Path to the page image
        page: Page number
        tile_size: Tile edge length in pixels
        quality: WebP quality (1-100)
        lossless: Encode lossless WebP

    Returns:
        (page description, number of repeated tiles)
    """
    result = tile_image(
        image_path.read_bytes(), tile_size, quality=quality, lossless=lossless
    )
    repeated = sum(1 for tile in result.tiles if tile.duplicate)
    return result.to_page_info(page), repeated


def build_metadata(
    image_paths: List[Path],
    tile_size: int,
    quality: int,
    lossless: bool = False,
) -> str:
    """Tile every page and return the serialized metadata document."""
    pages = []
    total_tiles = 0
    total_repeated = 0
    for page, image_path in enumerate(tqdm(image_paths, desc="Tiling pages")):
        info, repeated = tile_page(image_path, page, tile_size, quality, lossless)
        pages.append(info)
        total_tiles += len(info.tiles)
        total_repeated += repeated

    print(f"Total tiles: {total_tiles} ({total_repeated} repeated)", file=sys.stderr)
    return assemble_metadata(pages, tile_size).model_dump_json(indent=2)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Tile page images and write metadata.json'
    )
    parser.add_argument(
        'images', nargs='+', type=Path,
        help='Page images, in page order'
    )
    parser.add_argument(
        '--tile-size', type=int, default=settings.tile_size,
        help=f'Tile edge length in pixels (default: {settings.tile_size})'
    )
    parser.add_argument(
        '--quality', type=int, default=settings.quality,
        help=f'WebP quality 1-100 (default: {settings.quality})'
    )
    parser.add_argument(
        '--lossless', action='store_true', default=settings.lossless,
        help='Encode lossless WebP'
    )
    parser.add_argument(
        '--output', type=Path, default=None,
        help='Metadata output path (default: stdout)'
    )

    args = parser.parse_args(argv)

    missing = [p for p in args.images if not p.is_file()]
    if missing:
        print(f"Image not found: {missing[0]}", file=sys.stderr)
        return 1

    print(f"Found {len(args.images)} pages", file=sys.stderr)
    print(f"Tile size: {args.tile_size}x{args.tile_size}", file=sys.stderr)
    print(f"Quality: {'lossless' if args.lossless else args.quality}", file=sys.stderr)

    try:
        document = build_metadata(
            args.images, args.tile_size, args.quality, args.lossless
        )
    except TilerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output is None:
        print(document)
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(document + "\n")
        print(f"Metadata saved to: {args.output}", file=sys.stderr)
    return 0


if __name__ == '__main__':
    sys.exit(main())
