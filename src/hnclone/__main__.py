"""Run the hnclone web server with uvicorn."""

import uvicorn

from hnclone.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "hnclone.main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
