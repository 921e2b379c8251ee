import uvicorn

from geo_gateway.config import settings
from geo_gateway.logger import log_config


def main() -> None:
    """Run the FastAPI application with uvicorn."""
    uvicorn.run(
        "geo_gateway.main:app",
        host=settings.http_interface,
        port=settings.http_port,
        log_config=log_config,
    )


if __name__ == "__main__":
    main()
