"""Process entry point: serve the API with uvicorn on HOST:PORT."""

import uvicorn

from products_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "products_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
