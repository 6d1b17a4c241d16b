from __future__ import annotations

import logging
from typing import Optional

from .endpoint import resolve_endpoint
from .http_client import PredictionClient
from .models import AudioFile, Language, Outcome, SubmissionInput, ViewState
from .orchestrator import SubmissionOrchestrator
from .prober import ReachabilityProber
from .utils.config import ClientConfig
from .utils.runtime_logging import context_extra


class EmotionClientService:
    def __init__(self, config: ClientConfig, client: Optional[PredictionClient] = None):
        self.config = config
        self.client = client or PredictionClient()
        self.prober = ReachabilityProber(self.client)
        self.orchestrator = SubmissionOrchestrator(self.client)
        self.logger = logging.getLogger("emotion_client.service")
        self.endpoint = ""

    def start(self) -> str:
        """Resolve the initial endpoint and probe it. Needs a running event loop."""
        self.endpoint = resolve_endpoint(self.config.backend_url, self.config.page_url)
        if self.endpoint:
            self.logger.info("Resolved backend endpoint", extra=context_extra(endpoint=self.endpoint))
        else:
            self.logger.warning("No backend endpoint configured or guessed")
        self.prober.trigger(self.endpoint)
        return self.endpoint

    def set_endpoint(self, endpoint: str) -> None:
        if endpoint == self.endpoint:
            return
        self.endpoint = endpoint
        self.logger.info("Backend endpoint edited", extra=context_extra(endpoint=endpoint))
        self.prober.trigger(endpoint)

    async def submit(self, file: Optional[AudioFile], language: Optional[Language] = None) -> Outcome:
        # In-flight requests keep the endpoint they started with.
        endpoint = self.endpoint
        submission = SubmissionInput(file=file, language=language or self.config.language)
        return await self.orchestrator.submit(endpoint, submission)

    def snapshot(self) -> ViewState:
        return ViewState(
            endpoint=self.endpoint,
            submission=self.orchestrator.state,
            reachability=self.prober.status,
            warning=self.prober.warning,
        )
