"""Run the tiling service with uvicorn: python -m pamphlet_tiler"""

import uvicorn

from .config import settings


def main():
    uvicorn.run(
        "pamphlet_tiler.main:app",
        host=settings.host,
        port=settings.port,
        workers=settings.workers,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
