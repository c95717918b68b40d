"""Process entry point — `python -m message_api` serves the API with uvicorn.

Invariants:
    - lifespan="on": a failed database connection at startup exits the process
    - Listening URLs are logged by the lifespan, only once the database is reachable
"""

import uvicorn

from message_api.config import get_settings
from message_api.infrastructure.observability import setup_logging


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    uvicorn.run(
        "message_api.main:app",
        host=settings.host,
        port=settings.port,
        lifespan="on",
        log_config=None,
    )


if __name__ == "__main__":
    main()
