from __future__ import annotations

import logging

import uvicorn

from .configuration import load_settings


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings.server.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Importing main builds the app, so logging has to be configured first.
    from .main import app

    uvicorn.run(app, host=settings.server.host, port=settings.server.port, log_level=settings.server.log_level)


if __name__ == "__main__":
    main()
