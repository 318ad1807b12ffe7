from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from ..schemas import FieldChangePayload
from ..session import InteractionStateMachine
from ..types import DEFAULT_FEATURES, FEATURE_NAMES, MIN_FEATURE_VALUE, UnknownFieldError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ui"])

INDEX_HTML = Path(__file__).parent / "templates" / "index.html"

FIELD_LABELS = {
    "sepal_length": "Sepal Length (cm)",
    "sepal_width": "Sepal Width (cm)",
    "petal_length": "Petal Length (cm)",
    "petal_width": "Petal Width (cm)",
}
FIELD_STEP = 0.1


def _machine(request: Request) -> InteractionStateMachine:
    machine = getattr(request.app.state, "session", None)
    if machine is None:
        raise HTTPException(status_code=500, detail="Session not initialised")
    return machine


def _state_payload(request: Request) -> dict[str, Any]:
    payload = _machine(request).snapshot().as_dict()
    payload["backend_url"] = getattr(request.app.state, "backend_url", None)
    return payload


@router.get("/", include_in_schema=False)
async def root() -> RedirectResponse:
    return RedirectResponse(url="/ui")


@router.get("/ui", response_class=HTMLResponse)
async def ui_root() -> HTMLResponse:
    if not INDEX_HTML.exists():
        raise HTTPException(status_code=500, detail="UI template missing")
    return HTMLResponse(INDEX_HTML.read_text(encoding="utf-8"))


@router.get("/ui/fields")
async def ui_fields() -> dict[str, Any]:
    return {
        "fields": [
            {
                "name": name,
                "label": FIELD_LABELS[name],
                "min": MIN_FEATURE_VALUE,
                "step": FIELD_STEP,
                "default": DEFAULT_FEATURES[name],
            }
            for name in FEATURE_NAMES
        ]
    }


@router.get("/ui/state")
async def ui_state(request: Request) -> dict[str, Any]:
    return _state_payload(request)


@router.post("/ui/inputs")
async def update_input(payload: FieldChangePayload, request: Request) -> dict[str, Any]:
    try:
        _machine(request).on_field_change(payload.field, payload.value)
    except UnknownFieldError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _state_payload(request)


@router.post("/ui/predict")
async def predict(
    request: Request,
    wait: bool = Query(default=False, description="Respond only after the prediction completes"),
) -> dict[str, Any]:
    machine = _machine(request)
    was_submitting = machine.loading
    if wait:
        await machine.submit()
    else:
        machine.begin_submit()
    payload = _state_payload(request)
    payload["accepted"] = not was_submitting
    return payload


__all__ = ["router"]
