from __future__ import annotations

import enum
import mimetypes
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union


class Language(enum.Enum):
    ENGLISH = "English"
    KANNADA = "Kannada"
    MARATHI = "Marathi"


class ReachabilityStatus(enum.Enum):
    UNKNOWN = "unknown"
    WARNING = "warning"
    CLEAR = "clear"


@dataclass(frozen=True)
class AudioFile:
    filename: str
    content: bytes = field(repr=False)
    content_type: str = "application/octet-stream"

    @classmethod
    def from_path(cls, path: Path | str) -> "AudioFile":
        path = Path(path)
        content_type, _ = mimetypes.guess_type(path.name)
        return cls(
            filename=path.name,
            content=path.read_bytes(),
            content_type=content_type or "application/octet-stream",
        )


@dataclass(frozen=True)
class SubmissionInput:
    file: Optional[AudioFile]
    language: Language = Language.ENGLISH


@dataclass(frozen=True)
class PredictionResult:
    emotion: str
    probabilities: dict[str, float]
    tf_available: Optional[bool] = None
    flags: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Any) -> "PredictionResult":
        """Build a result from the decoded ``/predict`` JSON body.

        Raises ValueError when the payload does not carry a string ``emotion``
        and a ``probabilities`` mapping of label -> number.
        """
        if not isinstance(payload, dict):
            raise ValueError("Prediction response is not a JSON object")

        emotion = payload.get("emotion")
        if not isinstance(emotion, str):
            raise ValueError("Prediction response is missing 'emotion'")

        raw = payload.get("probabilities")
        if not isinstance(raw, dict):
            raise ValueError("Prediction response is missing 'probabilities'")

        probabilities: dict[str, float] = {}
        for label, value in raw.items():
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Probability for '{label}' is not a number")
            probabilities[str(label)] = float(value)

        tf_available = payload.get("tf_available")
        flags = {
            key: value
            for key, value in payload.items()
            if key not in ("emotion", "probabilities", "tf_available")
        }
        return cls(
            emotion=emotion,
            probabilities=probabilities,
            tf_available=tf_available if isinstance(tf_available, bool) else None,
            flags=flags,
        )


# Submission state: exactly one of these is active at a time.

@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Submitting:
    submission_id: str
    endpoint: str


@dataclass(frozen=True)
class Succeeded:
    result: PredictionResult


@dataclass(frozen=True)
class Failed:
    message: str


SubmissionState = Union[Idle, Submitting, Succeeded, Failed]
Outcome = Union[Succeeded, Failed]


@dataclass(frozen=True)
class ViewState:
    endpoint: str
    submission: SubmissionState
    reachability: ReachabilityStatus
    warning: str = ""

    @property
    def loading(self) -> bool:
        return isinstance(self.submission, Submitting)

    @property
    def error(self) -> str:
        return self.submission.message if isinstance(self.submission, Failed) else ""

    @property
    def result(self) -> Optional[PredictionResult]:
        return self.submission.result if isinstance(self.submission, Succeeded) else None
