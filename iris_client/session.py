from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, Union

from .errors import ClientError, ValidationError
from .inputs import InputController
from .presenter import ProbabilityBar, format_species, present
from .types import FEATURE_NAMES, FeatureVector, PredictionClient, PredictionRequest, PredictionResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    name: ClassVar[str] = "idle"


@dataclass(frozen=True)
class Submitting:
    request: PredictionRequest
    name: ClassVar[str] = "submitting"


@dataclass(frozen=True)
class Success:
    result: PredictionResult
    name: ClassVar[str] = "success"


@dataclass(frozen=True)
class Failed:
    message: str
    error: Optional[ClientError] = field(default=None, compare=False)
    name: ClassVar[str] = "failed"


InteractionState = Union[Idle, Submitting, Success, Failed]


@dataclass(frozen=True)
class SessionSnapshot:
    """Everything the view needs to render one frame of the session."""

    status: str
    inputs: dict[str, float | None]
    display: dict[str, str]
    loading: bool
    result: PredictionResult | None
    error: str | None
    bars: list[ProbabilityBar]

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "inputs": dict(self.inputs),
            "display": dict(self.display),
            "loading": self.loading,
            "result": self.result.as_dict() if self.result else None,
            "species_display": format_species(self.result.species) if self.result else None,
            "error": self.error,
            "bars": [bar.as_dict() for bar in self.bars],
        }


class InteractionStateMachine:
    """Sequences Idle -> Submitting -> Success/Failed for one user session.

    All methods must run on the same event loop. The blocking client call is
    moved to a worker thread, so the loop keeps serving reads of ``state``
    while a submission is in flight. At most one submission runs at a time;
    there is no cancellation and no timeout beyond the client's transport.
    """

    def __init__(
        self,
        client: PredictionClient,
        controller: InputController | None = None,
    ) -> None:
        self._client = client
        self.inputs = controller or InputController()
        self._state: InteractionState = Idle()
        self._inflight: asyncio.Task[InteractionState] | None = None

    @property
    def state(self) -> InteractionState:
        return self._state

    @property
    def loading(self) -> bool:
        return isinstance(self._state, Submitting)

    @property
    def result(self) -> PredictionResult | None:
        return self._state.result if isinstance(self._state, Success) else None

    @property
    def error(self) -> str | None:
        return self._state.message if isinstance(self._state, Failed) else None

    def on_field_change(self, field_name: str, raw_text: str) -> FeatureVector:
        return self.inputs.on_field_change(field_name, raw_text)

    def begin_submit(self) -> asyncio.Task[InteractionState] | None:
        """Start a submission unless one is already in flight.

        Returns the task applying the outcome, or ``None`` when nothing was
        sent (already submitting, or the inputs failed validation).
        """
        if isinstance(self._state, Submitting):
            logger.debug("Submit ignored; a prediction is already in flight")
            return None
        vector = self.inputs.vector
        try:
            request = PredictionRequest.from_vector(vector)
        except ValidationError as exc:
            self._transition(Failed(message=exc.message, error=exc))
            return None
        self._transition(Submitting(request=request))
        loop = asyncio.get_running_loop()
        self._inflight = loop.create_task(self._complete(vector))
        return self._inflight

    async def submit(self) -> InteractionState:
        task = self.begin_submit() or self._inflight
        if task is not None:
            # Shielded: a caller going away must not abort the request.
            await asyncio.shield(task)
        return self._state

    async def _complete(self, vector: FeatureVector) -> InteractionState:
        try:
            outcome = await asyncio.to_thread(self._client.submit, vector)
        except Exception as exc:
            logger.exception("Prediction client raised outside the error taxonomy")
            outcome = ClientError(f"Unexpected error: {exc}")
        finally:
            self._inflight = None

        if isinstance(outcome, PredictionResult):
            self._transition(Success(result=outcome))
        elif isinstance(outcome, ClientError):
            self._transition(Failed(message=outcome.message, error=outcome))
        else:
            self._transition(
                Failed(message=f"Unexpected client outcome: {type(outcome).__name__}")
            )
        return self._state

    def snapshot(self) -> SessionSnapshot:
        result = self.result
        return SessionSnapshot(
            status=self._state.name,
            inputs=self.inputs.vector.as_dict(),
            display={name: self.inputs.display_value(name) for name in FEATURE_NAMES},
            loading=self.loading,
            result=result,
            error=self.error,
            bars=present(result) if result is not None else [],
        )

    def _transition(self, new_state: InteractionState) -> None:
        previous = self._state
        self._state = new_state
        if isinstance(new_state, Failed):
            logger.info("Interaction %s -> failed: %s", previous.name, new_state.message)
        elif isinstance(new_state, Success):
            logger.info(
                "Interaction %s -> success species=%s", previous.name, new_state.result.species
            )
        else:
            logger.debug("Interaction %s -> %s", previous.name, new_state.name)


__all__ = [
    "Failed",
    "Idle",
    "InteractionState",
    "InteractionStateMachine",
    "SessionSnapshot",
    "Submitting",
    "Success",
]
