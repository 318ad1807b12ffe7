from __future__ import annotations

import logging

from fastapi import FastAPI

from .client import PredictionHttpClient
from .config import DEFAULT_BACKEND_URL
from .inputs import InputController
from .session import InteractionStateMachine
from .types import PredictionClient
from .web import register_ui

logger = logging.getLogger(__name__)


def create_app(
    client: PredictionClient | None = None,
    backend_url: str = DEFAULT_BACKEND_URL,
    timeout: float | None = None,
) -> FastAPI:
    """Build the UI application around a single interaction session."""
    selected_client = client or PredictionHttpClient(base_url=backend_url, timeout=timeout)
    session = InteractionStateMachine(client=selected_client, controller=InputController())

    app = FastAPI(title="Iris Classifier", version="0.1.0")
    app.state.session = session
    app.state.client = selected_client
    app.state.backend_url = backend_url

    logger.info(
        "UI server initialised client=%s backend_url=%s timeout=%s",
        selected_client.__class__.__name__,
        backend_url,
        timeout,
    )

    @app.get("/health", response_model=dict[str, str])
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    register_ui(app)
    return app


__all__ = ["create_app"]
