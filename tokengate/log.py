"""
Logging setup.

Modules log through ``logging.getLogger(__name__)``; this only installs the
root handler. Passwords, hashes and tokens are never logged.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
    for noisy in ("botocore", "urllib3", "httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
