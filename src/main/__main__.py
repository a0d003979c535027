"""
Main module entry point.

This allows running the HTTP service as: python -m src.main
"""

import uvicorn

from .config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "src.main.app:app",
        host="0.0.0.0",
        port=settings.service.port,
        reload=settings.service.reload,
    )


if __name__ == "__main__":
    main()
