"""Tests for the virtual countdown timers."""

from __future__ import annotations

from catacomb_timers import Timers


class Recorder:
    def __init__(self) -> None:
        self.fired: list = []
        self.timers = Timers(self.fired.append)

    def run(self, ticks: int) -> None:
        for _ in range(ticks):
            self.timers.tick()


class TestTimers:
    def test_one_shot_fires_once(self) -> None:
        r = Recorder()
        r.timers.set_countdown("a", 3)
        r.run(2)
        assert r.fired == []
        r.run(1)
        assert r.fired == ["a"]
        assert not r.timers.is_active("a")
        r.run(10)
        assert r.fired == ["a"]

    def test_repeating_fires_every_period(self) -> None:
        r = Recorder()
        r.timers.set_countdown("a", 2, repeating=True)
        r.run(6)
        assert r.fired == ["a", "a", "a"]
        assert r.timers.is_active("a")

    def test_minimum_one_tick(self) -> None:
        r = Recorder()
        r.timers.set_countdown("a", 0)
        r.run(1)
        assert r.fired == ["a"]

    def test_remaining(self) -> None:
        r = Recorder()
        r.timers.set_countdown("a", 5)
        r.run(2)
        assert r.timers.remaining("a") == 3
        assert r.timers.remaining("missing") is None

    def test_set_again_replaces(self) -> None:
        r = Recorder()
        r.timers.set_countdown("a", 2)
        r.run(1)
        r.timers.set_countdown("a", 3)
        r.run(2)
        assert r.fired == []
        r.run(1)
        assert r.fired == ["a"]

    def test_clear(self) -> None:
        r = Recorder()
        r.timers.set_countdown("a", 1)
        r.timers.set_countdown("b", 1)
        r.timers.clear_countdown("a")
        r.run(1)
        assert r.fired == ["b"]

        r.timers.set_countdown("c", 1, repeating=True)
        r.timers.clear_all()
        r.run(3)
        assert r.fired == ["b"]

    def test_callback_can_clear_a_later_timer(self) -> None:
        fired = []

        def on_fired(timer_id):
            fired.append(timer_id)
            if timer_id == "first":
                timers.clear_countdown("second")

        timers = Timers(on_fired)
        timers.set_countdown("first", 1)
        timers.set_countdown("second", 1)
        timers.tick()
        assert fired == ["first"]

    def test_repeating_cleared_in_its_own_callback(self) -> None:
        fired = []

        def on_fired(timer_id):
            fired.append(timer_id)
            if len(fired) == 3:
                timers.clear_countdown(timer_id)

        timers = Timers(on_fired)
        timers.set_countdown("a", 1, repeating=True)
        for _ in range(10):
            timers.tick()
        assert fired == ["a", "a", "a"]
        assert not timers.is_active("a")

    def test_callback_can_restart_its_own_timer(self) -> None:
        fired = []

        def on_fired(timer_id):
            fired.append(timer_id)
            if len(fired) == 1:
                timers.set_countdown(timer_id, 2)

        timers = Timers(on_fired)
        timers.set_countdown("a", 1)
        timers.tick()
        timers.tick()
        assert fired == ["a"]
        timers.tick()
        assert fired == ["a", "a"]

    def test_timer_added_during_tick_waits_for_next_tick(self) -> None:
        fired = []

        def on_fired(timer_id):
            fired.append(timer_id)
            if timer_id == "a":
                timers.set_countdown("b", 1)

        timers = Timers(on_fired)
        timers.set_countdown("a", 1)
        timers.tick()
        assert fired == ["a"]
        timers.tick()
        assert fired == ["a", "b"]
