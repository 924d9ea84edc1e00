"""Runtime configuration read from environment variables."""

import logging
import os
from dataclasses import dataclass

DEFAULT_PORT = 8001


@dataclass(frozen=True)
class Settings:
    host: str = ""
    port: int = DEFAULT_PORT
    log_level: str = "INFO"


def load_settings(environ=os.environ) -> Settings:
    host = environ.get("HOST", "")
    try:
        port = int(environ.get("PORT", str(DEFAULT_PORT)))
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {environ.get('PORT')!r}") from None
    if not 0 <= port <= 65535:
        raise ValueError(f"PORT out of range: {port}")

    log_level = environ.get("LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"Unknown LOG_LEVEL: {log_level}")

    return Settings(host=host, port=port, log_level=log_level)
