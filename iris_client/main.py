from __future__ import annotations

import argparse
import logging
from typing import Sequence

import uvicorn

from .client import PredictionHttpClient
from .config import ClientConfig, load_config
from .mock import MockPredictionApi
from .server import create_app

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser; flags override values from the environment."""
    parser = argparse.ArgumentParser(
        description="Run the Iris classifier UI",
        epilog="Defaults come from IRIS_BACKEND_URL, IRIS_BACKEND_TIMEOUT, "
        "IRIS_UI_HOST and IRIS_UI_PORT (a .env file is honoured).",
    )
    parser.add_argument(
        "--backend-url",
        default=None,
        help="Base URL of the prediction service (default: from environment)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Transport timeout in seconds (default: none)",
    )
    parser.add_argument("--host", default=None, help="Override UI host")
    parser.add_argument("--port", type=int, default=None, help="Override UI port")
    parser.add_argument(
        "--api",
        choices=["http", "mock"],
        default="http",
        help="prediction backend to use; mock answers offline",
    )
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    return parser


def resolve_config(args: argparse.Namespace, base: ClientConfig) -> ClientConfig:
    return ClientConfig(
        backend_url=args.backend_url or base.backend_url,
        timeout=args.timeout if args.timeout is not None else base.timeout,
        host=args.host or base.host,
        port=args.port if args.port is not None else base.port,
    )


def build_client(args: argparse.Namespace, config: ClientConfig) -> PredictionHttpClient | MockPredictionApi:
    if args.api == "mock":
        return MockPredictionApi()
    client = PredictionHttpClient(base_url=config.backend_url, timeout=config.timeout)
    if not client.health():
        logger.warning(
            "Prediction service at %s is not answering yet; submissions will fail until it does",
            config.backend_url,
        )
    return client


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.INFO,
            format="%(levelname)s [%(name)s] %(message)s",
        )

    try:
        base = load_config()
    except ValueError as exc:
        parser.error(str(exc))
    config = resolve_config(args, base)

    client = build_client(args, config)
    app = create_app(client=client, backend_url=config.backend_url, timeout=config.timeout)
    logger.info("Starting UI on http://%s:%d/ui", config.host, config.port)
    uvicorn.run(app, host=config.host, port=config.port, log_level="debug" if args.verbose else "info")


if __name__ == "__main__":
    main()
