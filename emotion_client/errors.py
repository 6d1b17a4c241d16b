from __future__ import annotations


MISSING_ENDPOINT_MESSAGE = "Please set a valid Backend URL"
MISSING_FILE_MESSAGE = "Please choose an audio file"
PREDICTION_FAILED_MESSAGE = "Prediction failed"
UNREACHABLE_MESSAGE = "Backend not reachable. Please verify the Backend URL."


class EmotionClientError(RuntimeError):
    pass


class PredictionHTTPError(EmotionClientError):
    """The prediction service answered with a non-2xx status."""

    def __init__(self, status_code: int, text: str) -> None:
        super().__init__(text)
        self.status_code = status_code
        self.text = text
