"""Plain-text rendering of a ``ViewState``."""

from __future__ import annotations

from .models import PredictionResult, ReachabilityStatus, ViewState

TITLE = "Multilingual Speech Emotion Recognition"
ENDPOINT_HINT = "If empty, set this to the API URL. Example: replace -3000 with -8000 in the domain."
LOADING_TEXT = "Analyzing…"

BAR_WIDTH = 40
DETECTED_FILL = "█"
OTHER_FILL = "▒"
EMPTY_FILL = "░"
# Even a zero probability gets a sliver of bar.
MIN_BAR_PERCENT = 2.0


def bar(probability: float, detected: bool, width: int = BAR_WIDTH) -> str:
    percent = min(100.0, max(MIN_BAR_PERCENT, probability * 100))
    filled = max(1, round(width * percent / 100))
    fill = DETECTED_FILL if detected else OTHER_FILL
    return fill * filled + EMPTY_FILL * (width - filled)


def _label(name: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in name.split(" "))


def _tf_flag(value) -> str:
    if value is None:
        return "undefined"
    return str(value).lower()


def render_result(result: PredictionResult, width: int = BAR_WIDTH) -> list[str]:
    lines = [f"Detected emotion: {result.emotion}"]
    if result.probabilities:
        label_width = max(len(name) for name in result.probabilities)
        for name, probability in result.probabilities.items():
            lines.append(
                f"  {_label(name):<{label_width}}  {probability * 100:5.1f}%  "
                f"{bar(probability, name == result.emotion, width)}"
            )
    lines.append(f"TF available: {_tf_flag(result.tf_available)}")
    return lines


def render(view: ViewState, width: int = BAR_WIDTH) -> str:
    lines = [TITLE, "", f"Backend URL: {view.endpoint or '(not set)'}"]
    if not view.endpoint:
        lines.append(f"  {ENDPOINT_HINT}")
    if view.reachability is ReachabilityStatus.WARNING and view.warning:
        lines.append(f"Warning: {view.warning}")

    if view.loading:
        lines.append(LOADING_TEXT)
    elif view.error:
        lines.append(f"Error: {view.error}")

    if view.result is not None:
        lines.append("")
        lines.extend(render_result(view.result, width))
    return "\n".join(lines)
