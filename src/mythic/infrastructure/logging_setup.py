"""Logging setup shared by the HTTP server and the CLI."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    # uvicorn's access log repeats what the handlers already report
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
