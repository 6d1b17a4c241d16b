from .client_service import EmotionClientService
from .endpoint import DEFAULT_STRATEGIES, resolve_endpoint
from .http_client import PredictionClient
from .models import (
    AudioFile,
    Failed,
    Idle,
    Language,
    PredictionResult,
    ReachabilityStatus,
    SubmissionInput,
    Submitting,
    Succeeded,
    ViewState,
)
from .orchestrator import SubmissionOrchestrator
from .prober import ReachabilityProber

__all__ = [
    "AudioFile",
    "DEFAULT_STRATEGIES",
    "EmotionClientService",
    "Failed",
    "Idle",
    "Language",
    "PredictionClient",
    "PredictionResult",
    "ReachabilityProber",
    "ReachabilityStatus",
    "SubmissionInput",
    "SubmissionOrchestrator",
    "Submitting",
    "Succeeded",
    "ViewState",
    "resolve_endpoint",
]
