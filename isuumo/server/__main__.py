"""Run the isuumo API server: ``python -m isuumo.server``."""

import uvicorn

from .core.config import settings

if __name__ == "__main__":
    uvicorn.run("isuumo.server.main:app", host=settings.server_host, port=settings.server_port)
