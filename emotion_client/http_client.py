from __future__ import annotations

import logging
from typing import Any

import requests

from .errors import PredictionHTTPError
from .models import AudioFile, Language

HEALTH_PATH = "/health"
PREDICT_PATH = "/predict"

_LOGGER = logging.getLogger("emotion_client.http")


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def join_url(endpoint: str, path: str) -> str:
    return f"{endpoint.rstrip('/')}{path}"


class PredictionClient:
    """Blocking HTTP calls against the prediction service.

    Both calls are meant to run in an executor, possibly at the same time, so
    each one goes through its own ``requests`` call rather than a shared
    session. Neither sets a timeout; a request runs until the transport
    reports success or failure.
    """

    def check_health(self, endpoint: str) -> bool:
        url = join_url(endpoint, HEALTH_PATH)
        try:
            response = requests.get(url)
        except (requests.RequestException, ValueError) as exc:
            # urllib3 reports malformed hosts as LocationParseError (a ValueError)
            _LOGGER.debug("Health check to %s failed: %s", url, exc)
            return False
        _LOGGER.debug("Health check to %s returned %s", url, response.status_code)
        return is_success(response.status_code)

    def predict(self, endpoint: str, audio: AudioFile, language: Language) -> Any:
        """POST the clip and return the decoded JSON body.

        Raises PredictionHTTPError on a non-2xx status, requests exceptions on
        transport failures and ValueError when the URL or the body is malformed.
        """
        url = join_url(endpoint, PREDICT_PATH)
        files = {"file": (audio.filename, audio.content, audio.content_type)}
        data = {"language": language.value}
        response = requests.post(url, files=files, data=data)
        if not is_success(response.status_code):
            raise PredictionHTTPError(response.status_code, response.text)
        return response.json()
