"""Fire-and-forget task queue for work that must not delay a reply.

Tasks are popped before they run, so each one is attempted at most once.
Failures are logged and dropped; nothing is retried or reported back.
"""
import asyncio
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List

from ..utils.logger import get_logger

logger = get_logger()


@dataclass
class ScheduledTask:
    delay_ms: int
    task: Callable[..., Awaitable[Any]]
    kwargs: Dict[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return getattr(self.task, "__name__", repr(self.task))


class TaskQueue:
    def __init__(self):
        self._pending: List[ScheduledTask] = []

    def __len__(self):
        return len(self._pending)

    def run_after(self, delay_ms: int, task: Callable[..., Awaitable[Any]], **kwargs) -> ScheduledTask:
        scheduled = ScheduledTask(delay_ms=max(0, delay_ms), task=task, kwargs=kwargs)
        self._pending.append(scheduled)
        return scheduled

    async def drain(self) -> int:
        """Run every queued task once, in enqueue order. Returns how many succeeded."""
        succeeded = 0
        while self._pending:
            scheduled = self._pending.pop(0)
            if scheduled.delay_ms:
                await asyncio.sleep(scheduled.delay_ms / 1000)
            try:
                await scheduled.task(**scheduled.kwargs)
                succeeded += 1
            except Exception:
                logger.exception(f"[SCHEDULER] task '{scheduled.name}' failed; dropped")
        return succeeded
