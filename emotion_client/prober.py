from __future__ import annotations

import asyncio
import logging
from functools import partial
from typing import Callable, Optional

from .errors import UNREACHABLE_MESSAGE
from .http_client import PredictionClient
from .models import ReachabilityStatus
from .utils.runtime_logging import context_extra

StatusListener = Callable[[ReachabilityStatus, str], None]


class ReachabilityProber:
    """Fire-and-forget ``/health`` checks, one per endpoint change.

    Every trigger bumps a sequence number; a finished probe only writes the
    status if no newer trigger happened in the meantime.
    """

    def __init__(self, client: PredictionClient) -> None:
        self.client = client
        self.logger = logging.getLogger("emotion_client.prober")
        self.status = ReachabilityStatus.UNKNOWN
        self.warning = ""
        self._seq = 0
        self._tasks: set[asyncio.Task] = set()
        self._listeners: list[StatusListener] = []

    @property
    def seq(self) -> int:
        return self._seq

    def add_listener(self, listener: StatusListener) -> None:
        self._listeners.append(listener)

    def trigger(self, endpoint: str) -> Optional[asyncio.Task]:
        self._seq += 1
        if not endpoint:
            return None

        seq = self._seq
        task = asyncio.get_running_loop().create_task(self._probe(seq, endpoint))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def wait(self) -> None:
        if self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def _probe(self, seq: int, endpoint: str) -> None:
        loop = asyncio.get_running_loop()
        ctx = context_extra(endpoint=endpoint, probe_seq=seq)
        try:
            ok = await loop.run_in_executor(None, partial(self.client.check_health, endpoint))
        except Exception as exc:
            self.logger.debug(f"Health check raised {exc!r}", extra=ctx)
            ok = False

        if seq != self._seq:
            self.logger.debug("Dropping stale probe result ok=%s", ok, extra=ctx)
            return

        if ok:
            self._set_status(ReachabilityStatus.CLEAR, "")
        else:
            self.logger.warning("Backend health check failed", extra=ctx)
            self._set_status(ReachabilityStatus.WARNING, UNREACHABLE_MESSAGE)

    def _set_status(self, status: ReachabilityStatus, warning: str) -> None:
        self.status = status
        self.warning = warning
        for listener in self._listeners:
            listener(status, warning)
