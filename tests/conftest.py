"""Fake collaborators for the catacomb core: renderer, audio and controls."""

from __future__ import annotations

import itertools

import pytest

import catacomb_config as cfg
from catacomb_camera import Direction


class FakeRenderer:
    def __init__(self) -> None:
        self.visuals: dict[int, dict] = {}
        self.created: list[int] = []
        self.destroyed: list[int] = []
        self._ids = itertools.count(1)

    def create_visual(self, kind: str, **params) -> int:
        handle = next(self._ids)
        self.visuals[handle] = {"kind": kind, **params}
        self.created.append(handle)
        return handle

    def destroy_visual(self, handle: int) -> None:
        assert handle in self.visuals, f"visual {handle} destroyed twice"
        del self.visuals[handle]
        self.destroyed.append(handle)

    def of_kind(self, kind: str) -> list[dict]:
        return [v for v in self.visuals.values() if v["kind"] == kind]


class FakeAudio:
    def __init__(self) -> None:
        self.is_playing = False
        self.volume = 1.0
        self.loop = None
        self.stops = 0

    def play(self, loop: bool = False) -> None:
        self.is_playing = True
        self.loop = loop

    def stop(self) -> None:
        self.is_playing = False
        self.stops += 1

    def set_volume(self, volume: float) -> None:
        self.volume = volume


class FakeControls:
    def __init__(self, *pressed: Direction) -> None:
        self.pressed = set(pressed)

    def is_pressed(self, direction: Direction) -> bool:
        return direction in self.pressed


NO_INPUT = FakeControls()
LEFT = FakeControls(Direction.LEFT)
RIGHT = FakeControls(Direction.RIGHT)
CONFIRM = FakeControls(Direction.CONFIRM)


class FakeSelector:
    """Door selector with fixed bounds that records every call."""

    def __init__(self, smallest: int = -1, largest: int = 1, enterable=None) -> None:
        self.smallest_index = smallest
        self.largest_index = largest
        self.enterable = enterable
        self.moves: list[int] = []
        self.entered: list[int] = []

    def can_enter_door(self, index: int) -> bool:
        if not self.smallest_index <= index <= self.largest_index:
            return False
        return self.enterable is None or index in self.enterable

    def enter_door(self, index: int) -> None:
        self.entered.append(index)

    def moved_to(self, index: int) -> None:
        self.moves.append(index)


def run(target, ticks: int, controls=NO_INPUT) -> None:
    for _ in range(ticks):
        target.step(controls)


def wake(camera) -> None:
    """Run the camera past its startup delay."""
    run(camera, cfg.MOVEMENT_DELAY_TICKS)
    assert not camera.is_moving


@pytest.fixture
def renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def audio() -> FakeAudio:
    return FakeAudio()
