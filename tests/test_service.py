import random

import pytest

from callcenter.calls import Call, Priority
from callcenter.service import CallCenter, Statistics, format_attendance


class FixedRng:
    def __init__(self, value):
        self.value = value
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.value


def test_statistics_start_empty():
    stats = Statistics()
    assert stats.total() == 0
    for priority in Priority:
        assert stats.count(priority) == 0
        assert stats.average(priority) is None


def test_statistics_record_and_average():
    stats = Statistics()
    stats.record(Priority.HIGH, 4)
    stats.record(Priority.HIGH, 4)
    stats.record(Priority.MEDIUM, 9)
    assert stats.count(Priority.HIGH) == 2
    assert stats.average(Priority.HIGH) == 4.0
    assert stats.average(Priority.MEDIUM) == 9.0
    assert stats.total() == 3


def test_statistics_unknown_priority_counts_as_low():
    stats = Statistics()
    stats.record(42, 3)
    assert stats.count(Priority.LOW) == 1
    assert stats.count(42) == 1


def test_attend_next_on_empty_center_returns_none():
    center = CallCenter(FixedRng(5))
    assert center.attend_next() is None
    assert center.history.is_empty()
    assert center.statistics.total() == 0


def test_attend_next_follows_priority_order():
    center = CallCenter(FixedRng(5))
    center.add_call(Call("Ana", "x", Priority.LOW))
    center.add_call(Call("Bia", "y", Priority.HIGH))
    center.add_call(Call("Caio", "z", Priority.MEDIUM))
    names = [center.attend_next().call.name for _ in range(3)]
    assert names == ["Bia", "Caio", "Ana"]
    assert center.attend_next() is None


def test_attend_next_records_history_and_statistics():
    rng = FixedRng(7)
    center = CallCenter(rng)
    center.add_call(Call("Ana", "x", Priority.MEDIUM))
    entry = center.attend_next()
    assert entry.wait_minutes == 7
    assert rng.calls == [(1, 10)]
    assert [e.call.name for e in center.history] == ["Ana"]
    assert center.statistics.count(Priority.MEDIUM) == 1
    assert center.statistics.average(Priority.MEDIUM) == 7.0


def test_random_waits_stay_in_range():
    center = CallCenter(random.Random(0))
    for i in range(50):
        center.add_call(Call(f"c{i}", "r", Priority.HIGH))
    waits = [center.attend_next().wait_minutes for _ in range(50)]
    assert all(1 <= w <= 10 for w in waits)


def test_format_attendance():
    center = CallCenter(FixedRng(3))
    center.add_call(Call("Ana", "x", Priority.HIGH))
    text = format_attendance(center.attend_next())
    assert text == "\nAtendendo Ana (prioridade 1). Tempo de espera simulado: 3 minutos.\n\n"


def test_report_lists_counts_and_clients():
    center = CallCenter(FixedRng(2))
    center.add_call(Call("Ana", "x", Priority.HIGH))
    center.add_call(Call("Bia", "y", Priority.LOW))
    center.attend_next()
    center.attend_next()
    report = center.report()
    assert "Total de atendimentos: 2\n" in report
    assert "  Alta   : 1 chamadas (media espera: 2.0 min)\n" in report
    assert "  Baixa  : 1 chamadas (media espera: 2.0 min)\n" in report
    assert "Media  :" not in report
    assert report.index("  - Bia") < report.index("  - Ana")
    assert report.startswith("\n========= Relatorio Final =========\n")
    assert report.endswith("=====================================\n\n")


@pytest.mark.parametrize("priority", list(Priority))
def test_report_only_shows_attended_priority(priority):
    center = CallCenter(FixedRng(1))
    center.add_call(Call("Ana", "x", priority))
    center.attend_next()
    report = center.report()
    assert report.count("chamadas (media espera") == 1