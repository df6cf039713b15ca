"""Incoming calls and the three priority queues that hold them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum

MAX_NAME = 100
MAX_REASON = 200


class Priority(IntEnum):
    """Call priority; a lower value is served first."""

    HIGH = 1
    MEDIUM = 2
    LOW = 3


_DESCRIPTIONS = {
    Priority.HIGH: "Alta",
    Priority.MEDIUM: "Media",
    Priority.LOW: "Baixa",
}


def describe_priority(priority: int) -> str:
    """Return the display name of a priority, or "Desconhecida" if unknown."""
    try:
        return _DESCRIPTIONS[Priority(priority)]
    except ValueError:
        return "Desconhecida"


@dataclass(frozen=True)
class Call:
    """A customer call waiting to be attended."""

    name: str
    reason: str
    priority: int = Priority.LOW


class CallQueues:
    """Three FIFO queues, one per priority level."""

    def __init__(self) -> None:
        self._queues: dict[Priority, deque[Call]] = {p: deque() for p in Priority}

    def _queue_for(self, priority: int) -> deque[Call]:
        # Any priority other than high or medium lands in the low queue.
        try:
            return self._queues[Priority(priority)]
        except ValueError:
            return self._queues[Priority.LOW]

    def add(self, call: Call) -> None:
        """Append a call to the end of the queue matching its priority."""
        self._queue_for(call.priority).append(call)

    def pop_next(self) -> Call | None:
        """Remove and return the next call (high, then medium, then low), or None."""
        for priority in Priority:
            queue = self._queues[priority]
            if queue:
                return queue.popleft()
        return None

    def is_empty(self, priority: int) -> bool:
        """Tell whether the queue for the given priority holds no calls."""
        return not self._queue_for(priority)

    def calls(self, priority: int) -> list[Call]:
        """Return the calls waiting in one queue, front first."""
        return list(self._queue_for(priority))

    def format_queue(self, priority: int) -> str:
        """Render one queue as the text shown to the operator."""
        lines = [f"\nFila de prioridade {describe_priority(priority)}:"]
        queue = self._queue_for(priority)
        lines.extend(f"Cliente: {c.name} | Motivo: {c.reason}" for c in queue)
        if not queue:
            lines.append("[Vazia]")
        return "\n".join(lines) + "\n"

    def __len__(self) -> int:
        return sum(len(q) for q in self._queues.values())

    def __iter__(self) -> Iterator[Call]:
        for priority in Priority:
            yield from self._queues[priority]