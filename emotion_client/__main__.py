from __future__ import annotations

import argparse
import asyncio
import dataclasses
import logging
import sys
from pathlib import Path

from .client_service import EmotionClientService
from .models import AudioFile, Language, Succeeded
from .presentation import render
from .utils.config import ClientConfig
from .utils.runtime_logging import configure_logging

_LOGGER = logging.getLogger("emotion_client.main")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="emotion_client",
        description="Detect the emotion in an audio clip using a remote prediction service.",
    )
    parser.add_argument("audio", type=Path, nargs="?", help="Audio clip to analyze")
    parser.add_argument(
        "--language",
        choices=[language.value for language in Language],
        default=None,
        help="Spoken language of the clip (default: EMOTION_LANGUAGE or English)",
    )
    parser.add_argument("--backend-url", default=None, help="Backend URL override (default: BACKEND_URL)")
    parser.add_argument(
        "--page-url",
        default=None,
        help="Frontend location used to guess the backend (default: EMOTION_PAGE_URL)",
    )
    parser.add_argument("--log-level", default=None, help="Log level (default: EMOTION_LOG_LEVEL or INFO)")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> ClientConfig:
    config = ClientConfig.from_env()
    overrides = {}
    if args.backend_url is not None:
        overrides["backend_url"] = args.backend_url
    if args.page_url is not None:
        overrides["page_url"] = args.page_url
    if args.language is not None:
        overrides["language"] = Language(args.language)
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return dataclasses.replace(config, **overrides)


async def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    config = build_config(args)
    configure_logging(config.log_level)
    _LOGGER.debug(args)

    audio = None
    if args.audio is not None:
        try:
            audio = AudioFile.from_path(args.audio)
        except OSError as exc:
            _LOGGER.error("Cannot read audio file: %s", exc)
            return 1

    service = EmotionClientService(config)
    service.start()
    # The probe never blocks a submission; waiting here only keeps its
    # warning in the printed report.
    await service.prober.wait()
    outcome = await service.submit(audio, config.language)
    print(render(service.snapshot()))
    return 0 if isinstance(outcome, Succeeded) else 1


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    try:
        run()
    except KeyboardInterrupt:
        pass
