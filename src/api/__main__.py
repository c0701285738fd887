"""
Contacts API server.
Run: python -m api (from repo root, with .env or env vars set).
"""

import uvicorn

from api.main import app
from api.settings import load_settings


def main() -> None:
    settings = load_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
