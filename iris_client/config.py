"""Startup configuration for the iris classifier client.

Values come from the process environment, optionally seeded from a ``.env``
file in the working directory. They are read once when the UI starts; the
backend address cannot change for the lifetime of a session.

Variables:
- IRIS_BACKEND_URL: base URL of the prediction service
- IRIS_BACKEND_TIMEOUT: transport timeout in seconds (unset waits forever)
- IRIS_UI_HOST / IRIS_UI_PORT: where the UI server listens
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_BACKEND_URL = "http://localhost:8000"
DEFAULT_UI_HOST = "127.0.0.1"
DEFAULT_UI_PORT = 5173


@dataclass(frozen=True)
class ClientConfig:
    backend_url: str = DEFAULT_BACKEND_URL
    timeout: float | None = None
    host: str = DEFAULT_UI_HOST
    port: int = DEFAULT_UI_PORT


def load_config(
    environ: Mapping[str, str] | None = None,
    *,
    dotenv: bool = True,
) -> ClientConfig:
    """Build a ClientConfig from ``environ`` (``os.environ`` by default)."""
    if environ is None:
        if dotenv:
            load_dotenv()
        environ = os.environ

    backend_url = (environ.get("IRIS_BACKEND_URL") or "").strip() or DEFAULT_BACKEND_URL
    host = (environ.get("IRIS_UI_HOST") or "").strip() or DEFAULT_UI_HOST
    timeout = _parse_timeout(environ.get("IRIS_BACKEND_TIMEOUT"))
    port = _parse_port(environ.get("IRIS_UI_PORT"))

    config = ClientConfig(backend_url=backend_url, timeout=timeout, host=host, port=port)
    logger.debug("Loaded client config %s", config)
    return config


def _parse_timeout(value: str | None) -> float | None:
    if value is None or not value.strip():
        return None
    try:
        timeout = float(value)
    except ValueError as exc:
        raise ValueError(f"IRIS_BACKEND_TIMEOUT must be a number of seconds, got {value!r}") from exc
    if timeout <= 0:
        raise ValueError(f"IRIS_BACKEND_TIMEOUT must be positive, got {value!r}")
    return timeout


def _parse_port(value: str | None) -> int:
    if value is None or not value.strip():
        return DEFAULT_UI_PORT
    try:
        port = int(value)
    except ValueError as exc:
        raise ValueError(f"IRIS_UI_PORT must be an integer, got {value!r}") from exc
    if not 0 < port < 65536:
        raise ValueError(f"IRIS_UI_PORT out of range: {port}")
    return port


__all__ = ["ClientConfig", "DEFAULT_BACKEND_URL", "load_config"]
