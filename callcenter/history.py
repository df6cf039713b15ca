"""Stack of attended calls, most recent on top."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace

from .calls import Call, Priority

_DESCRIPTIONS = {
    Priority.HIGH: "Alta",
    Priority.MEDIUM: "Média",
    Priority.LOW: "Baixa",
}

_SEPARATOR = "   ----------------------------------------"


def _describe(priority: int) -> str:
    try:
        return _DESCRIPTIONS[Priority(priority)]
    except ValueError:
        return "Desconhecida"


@dataclass(frozen=True)
class HistoryEntry:
    """An attended call together with its simulated waiting time."""

    call: Call
    wait_minutes: int


class History:
    """Record of attended calls, iterated from most recent to oldest."""

    def __init__(self) -> None:
        self._entries: list[HistoryEntry] = []

    def push(self, call: Call, wait_minutes: int) -> HistoryEntry:
        """Record a copy of an attended call on top of the stack."""
        entry = HistoryEntry(replace(call), wait_minutes)
        self._entries.append(entry)
        return entry

    def pop(self) -> HistoryEntry | None:
        """Remove and return the most recent entry, or None if empty."""
        return self._entries.pop() if self._entries else None

    def is_empty(self) -> bool:
        """Tell whether no call has been recorded."""
        return not self._entries

    def count(self) -> int:
        """Return the number of recorded attendances."""
        return len(self._entries)

    def clear(self) -> None:
        """Discard every recorded entry."""
        self._entries.clear()

    def format(self) -> str:
        """Render the full history, most recent first."""
        lines = ["\n Historico de Atendimentos: "]
        if self.is_empty():
            lines.append("[Sem atendimentos realizados]\n")
            return "\n".join(lines) + "\n"
        for number, entry in enumerate(self, start=1):
            lines.append(f"{number}. Cliente: {entry.call.name}")
            lines.append(f"   Motivo: {entry.call.reason}")
            lines.append(f"   Prioridade: {_describe(entry.call.priority)}")
            lines.append(f"   Tempo de Espera: {entry.wait_minutes} minutos")
            lines.append(_SEPARATOR)
        return "\n".join(lines) + "\n\n"

    def __iter__(self) -> Iterator[HistoryEntry]:
        return reversed(self._entries)

    def __len__(self) -> int:
        return len(self._entries)