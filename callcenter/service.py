"""Attending queued calls and keeping the statistics for the final report."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Protocol

from .calls import Call, CallQueues, Priority
from .history import History, HistoryEntry

MIN_WAIT = 1
MAX_WAIT = 10

_REPORT_LABELS = {
    Priority.HIGH: "Alta   ",
    Priority.MEDIUM: "Media  ",
    Priority.LOW: "Baixa  ",
}


class _RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def _normalise(priority: int) -> Priority:
    # Anything other than high or medium is accounted as low.
    try:
        return Priority(priority)
    except ValueError:
        return Priority.LOW


@dataclass
class Statistics:
    """Number of attended calls and summed waiting time per priority."""

    counts: dict[Priority, int] = field(default_factory=lambda: {p: 0 for p in Priority})
    wait_sums: dict[Priority, int] = field(default_factory=lambda: {p: 0 for p in Priority})

    def record(self, priority: int, wait_minutes: int) -> None:
        """Account one attended call of the given priority."""
        key = _normalise(priority)
        self.counts[key] += 1
        self.wait_sums[key] += wait_minutes

    def total(self) -> int:
        """Return the number of attended calls over all priorities."""
        return sum(self.counts.values())

    def count(self, priority: int) -> int:
        """Return the number of attended calls of one priority."""
        return self.counts[_normalise(priority)]

    def average(self, priority: int) -> float | None:
        """Return the mean waiting time of one priority, or None if none attended."""
        key = _normalise(priority)
        if not self.counts[key]:
            return None
        return self.wait_sums[key] / self.counts[key]


def format_attendance(entry: HistoryEntry) -> str:
    """Render the message shown when a call is attended."""
    return (
        f"\nAtendendo {entry.call.name} (prioridade {int(entry.call.priority)}). "
        f"Tempo de espera simulado: {entry.wait_minutes} minutos.\n\n"
    )


class CallCenter:
    """Queues, attendance history and statistics of one working session."""

    def __init__(self, rng: _RandomSource | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.queues = CallQueues()
        self.history = History()
        self.statistics = Statistics()

    def add_call(self, call: Call) -> None:
        """Put a call into the queue matching its priority."""
        self.queues.add(call)

    def attend_next(self) -> HistoryEntry | None:
        """Attend the most urgent waiting call, or return None if none waits."""
        call = self.queues.pop_next()
        if call is None:
            return None
        wait = self.rng.randint(MIN_WAIT, MAX_WAIT)
        entry = self.history.push(call, wait)
        self.statistics.record(call.priority, wait)
        return entry

    def report(self) -> str:
        """Render the final report of attendances and waiting times."""
        lines = [
            "\n========= Relatorio Final =========",
            f"Total de atendimentos: {self.statistics.total()}",
        ]
        for priority in Priority:
            count = self.statistics.count(priority)
            if count:
                average = self.statistics.average(priority)
                lines.append(
                    f"  {_REPORT_LABELS[priority]}: {count} chamadas "
                    f"(media espera: {average:.1f} min)"
                )
        lines.append("\nClientes atendidos:")
        lines.extend(f"  - {entry.call.name}" for entry in self.history)
        lines.append("=====================================\n")
        return "\n".join(lines) + "\n"