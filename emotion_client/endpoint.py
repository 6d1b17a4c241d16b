from __future__ import annotations

from typing import Callable, Optional, Sequence
from urllib.parse import urlsplit

# Preview deployments serve the frontend on a "-3000." host and the API on "-8000.".
FRONTEND_PORT_MARKER = "-3000."
BACKEND_PORT_MARKER = "-8000."
DEFAULT_PORTS = {"http": 80, "https": 443}

Strategy = Callable[[Optional[str], Optional[str]], str]


def from_override(override: Optional[str], page_url: Optional[str]) -> str:
    return override or ""


def guess_from_location(override: Optional[str], page_url: Optional[str]) -> str:
    if not page_url:
        return ""
    try:
        parts = urlsplit(page_url)
        # .port validates the authority and raises ValueError on garbage
        port = parts.port
    except ValueError:
        return ""

    # hostname comes back lowercased, like a browser location
    hostname = parts.hostname
    if not parts.scheme or not hostname:
        return ""
    host = f"[{hostname}]" if ":" in hostname else hostname
    if port is not None and port != DEFAULT_PORTS.get(parts.scheme):
        host = f"{host}:{port}"
    if FRONTEND_PORT_MARKER not in host:
        return ""
    return f"{parts.scheme}://{host.replace(FRONTEND_PORT_MARKER, BACKEND_PORT_MARKER, 1)}"


def default_empty(override: Optional[str], page_url: Optional[str]) -> str:
    return ""


DEFAULT_STRATEGIES: tuple[Strategy, ...] = (
    from_override,
    guess_from_location,
    default_empty,
)


def resolve_endpoint(
    override: Optional[str],
    page_url: Optional[str],
    strategies: Sequence[Strategy] = DEFAULT_STRATEGIES,
) -> str:
    """Return the first non-empty endpoint produced by ``strategies``, else ``""``."""
    for strategy in strategies:
        endpoint = strategy(override, page_url)
        if endpoint:
            return endpoint
    return ""
