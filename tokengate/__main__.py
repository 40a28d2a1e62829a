"""
Run the HTTP service: ``python -m tokengate``.
"""

import uvicorn

from tokengate.api.app import create_app
from tokengate.config import get_settings
from tokengate.log import configure_logging


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
