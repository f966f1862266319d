"""Run the service with uvicorn: python -m query_echo."""

import uvicorn

from query_echo.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "query_echo.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
