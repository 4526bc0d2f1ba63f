from __future__ import annotations

from tickloop.runtime.duration import Duration
from tickloop.runtime.stat import Stat


def test_rate_reflects_last_closed_cycle() -> None:
    stat = Stat()
    for _ in range(10):
        stat.record(Duration.MILLI)
    stat.refresh()
    assert stat.get_rate() == 10

    for _ in range(15):
        stat.record(Duration.MILLI)
    assert stat.get_rate() == 10
    assert stat.cycle_count == 15

    stat.refresh()
    assert stat.get_rate() == 15
    assert stat.get_count() == 25
    stat.refresh()
    assert stat.get_rate() == 0
    assert stat.get_count() == 25


def test_find_average() -> None:
    stat = Stat()
    assert stat.find_average() == Duration.ZERO

    for seconds in (1.0, 2.0, 3.0):
        stat.record(Duration(seconds))

    assert stat.find_average() == Duration(2.0)
    assert stat.total == Duration(6.0)


def test_inplace_add_records_a_sample() -> None:
    stat = Stat()
    stat += Duration(3.0)
    stat.refresh()
    stat += Duration(5.0)

    assert stat.find_average() == Duration(4.0)
    assert stat.get_count() == 2
    assert stat.get_rate() == 1
    assert stat.cycle_count == 1
