"""Service settings; loads .env locally via python-dotenv."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env only when present (e.g. local dev); does not override existing env
load_dotenv()

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    cors_origins: tuple[str, ...] = ()


def get_host() -> str:
    return os.getenv("BOX_PACKING_HOST", DEFAULT_HOST)


def get_port() -> int:
    """Bind port from PORT. Raises ValueError when it is not a valid port."""
    raw_port = os.getenv("PORT", str(DEFAULT_PORT))
    try:
        port = int(raw_port)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got '{raw_port}'") from None
    if not 0 < port < 65536:
        raise ValueError(f"PORT out of range: {port}")
    return port


def get_log_level() -> str:
    return os.getenv("BOX_PACKING_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_cors_origins() -> tuple[str, ...]:
    origins = os.getenv("BOX_PACKING_CORS_ORIGINS", "")
    return tuple(o.strip() for o in origins.split(",") if o.strip())


def get_settings() -> Settings:
    """Read every setting at once. Only needed when binding a port."""
    return Settings(
        host=get_host(),
        port=get_port(),
        log_level=get_log_level(),
        cors_origins=get_cors_origins(),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
