from __future__ import annotations

import logging
from typing import Optional


DEFAULT_LOG_FIELDS = {
	"endpoint": "-",
	"probe_seq": "-",
	"submission_id": "-",
}

LOG_FORMAT = (
	"%(asctime)s %(levelname)s %(name)s "
	"endpoint=%(endpoint)s probe_seq=%(probe_seq)s submission_id=%(submission_id)s "
	"%(message)s"
)


class _ContextDefaults(logging.Filter):
	def filter(self, record: logging.LogRecord) -> bool:
		for key, value in DEFAULT_LOG_FIELDS.items():
			record.__dict__.setdefault(key, value)
		return True


def configure_logging(level: str = "INFO") -> None:
	# force=True swaps in fresh handlers, so each one needs the filter once.
	logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT, force=True)
	for handler in logging.getLogger().handlers:
		handler.addFilter(_ContextDefaults())


def context_extra(
	endpoint: Optional[str] = None,
	probe_seq: Optional[int] = None,
	submission_id: Optional[str] = None,
) -> dict[str, str]:
	extra = dict(DEFAULT_LOG_FIELDS)
	if endpoint:
		extra["endpoint"] = endpoint
	if probe_seq is not None:
		extra["probe_seq"] = str(probe_seq)
	if submission_id:
		extra["submission_id"] = submission_id
	return extra
