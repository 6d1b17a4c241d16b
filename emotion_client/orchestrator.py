from __future__ import annotations

import asyncio
import logging
import uuid
from functools import partial
from typing import Callable, Optional

from .errors import (
    MISSING_ENDPOINT_MESSAGE,
    MISSING_FILE_MESSAGE,
    PREDICTION_FAILED_MESSAGE,
    PredictionHTTPError,
)
from .http_client import PredictionClient
from .models import (
    Failed,
    Idle,
    Outcome,
    PredictionResult,
    SubmissionInput,
    SubmissionState,
    Submitting,
    Succeeded,
)
from .utils.runtime_logging import context_extra

StateListener = Callable[[SubmissionState], None]


class SubmissionOrchestrator:
    """Owns the lifecycle of a single prediction request.

    Idle -> Submitting -> Succeeded | Failed. A new ``submit`` call starts a
    fresh Submitting phase from whatever outcome the previous one left behind.
    Mutual exclusion is left to the caller, which should gate on ``loading``.
    """

    def __init__(self, client: PredictionClient) -> None:
        self.client = client
        self.logger = logging.getLogger("emotion_client.orchestrator")
        self._state: SubmissionState = Idle()
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def loading(self) -> bool:
        return isinstance(self._state, Submitting)

    def add_listener(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    async def submit(self, endpoint: str, submission: SubmissionInput) -> Outcome:
        if not endpoint:
            return self._finish(Failed(MISSING_ENDPOINT_MESSAGE))
        if submission.file is None:
            return self._finish(Failed(MISSING_FILE_MESSAGE))

        submission_id = uuid.uuid4().hex[:12]
        ctx = context_extra(endpoint=endpoint, submission_id=submission_id)
        self._set_state(Submitting(submission_id=submission_id, endpoint=endpoint))
        self.logger.info(
            f"Submitting file={submission.file.filename} language={submission.language.value}",
            extra=ctx,
        )

        outcome: Optional[Outcome] = None
        try:
            loop = asyncio.get_running_loop()
            payload = await loop.run_in_executor(
                None,
                partial(self.client.predict, endpoint, submission.file, submission.language),
            )
            result = PredictionResult.from_payload(payload)
            outcome = Succeeded(result)
            self.logger.info(f"Prediction succeeded emotion={result.emotion}", extra=ctx)
        except PredictionHTTPError as exc:
            self.logger.warning(f"Prediction rejected status={exc.status_code}", extra=ctx)
            outcome = Failed(exc.text or PREDICTION_FAILED_MESSAGE)
        except Exception as exc:
            self.logger.warning(f"Prediction failed: {exc}", extra=ctx)
            outcome = Failed(str(exc) or PREDICTION_FAILED_MESSAGE)
        finally:
            # Leaves Submitting exactly once, on every exit path, cancellation included.
            self._set_state(outcome if outcome is not None else Failed(PREDICTION_FAILED_MESSAGE))
        return outcome

    def _finish(self, outcome: Outcome) -> Outcome:
        self._set_state(outcome)
        return outcome

    def _set_state(self, state: SubmissionState) -> None:
        self._state = state
        for listener in self._listeners:
            listener(state)
