"""Configuration helpers for the emotion recognition client."""

from __future__ import annotations

import os
from dataclasses import dataclass

from ..models import Language


@dataclass(frozen=True)
class ClientConfig:
	# Optional backend URL override; wins over every other resolution strategy.
	backend_url: str = ""
	# Location the client is served from, used by the "-3000." -> "-8000." heuristic.
	page_url: str = ""
	language: Language = Language.ENGLISH
	log_level: str = "INFO"

	@classmethod
	def from_env(cls) -> "ClientConfig":
		"""Construct from os.environ with sensible defaults."""

		return cls(
			backend_url=os.getenv("BACKEND_URL", ""),
			page_url=os.getenv("EMOTION_PAGE_URL", ""),
			language=Language(os.getenv("EMOTION_LANGUAGE", Language.ENGLISH.value)),
			log_level=os.getenv("EMOTION_LOG_LEVEL", "INFO"),
		)


__all__ = ["ClientConfig"]
