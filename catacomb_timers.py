# catacomb_timers.py
# Virtual countdown timers, advanced once per game tick

from typing import Callable, Hashable


class Timers:
    """
    Countdowns keyed by id. Each tick() decrements every countdown;
    one that reaches zero fires on_fired(id) and either restarts
    (repeating) or is removed. Setting an id again replaces it.
    """

    def __init__(self, on_fired: Callable[[Hashable], None]):
        self.on_fired = on_fired
        # id -> [remaining, ticks, repeating]
        self._countdowns: dict[Hashable, list] = {}

    def set_countdown(self, timer_id: Hashable, ticks: int, repeating: bool = False) -> None:
        ticks = max(int(ticks), 1)
        self._countdowns[timer_id] = [ticks, ticks, repeating]

    def clear_countdown(self, timer_id: Hashable) -> None:
        self._countdowns.pop(timer_id, None)

    def clear_all(self) -> None:
        self._countdowns.clear()

    def is_active(self, timer_id: Hashable) -> bool:
        return timer_id in self._countdowns

    def remaining(self, timer_id: Hashable) -> int | None:
        entry = self._countdowns.get(timer_id)
        return entry[0] if entry is not None else None

    def tick(self) -> None:
        for timer_id in list(self._countdowns):
            entry = self._countdowns.get(timer_id)
            if entry is None:
                # cleared by an earlier callback this tick
                continue

            entry[0] -= 1
            if entry[0] > 0:
                continue

            if entry[2]:
                entry[0] = entry[1]
            else:
                del self._countdowns[timer_id]

            self.on_fired(timer_id)
