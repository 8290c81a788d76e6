# catacomb_game.py
# Owns the active area and the collaborators it draws, plays and listens with

from typing import Any, Protocol

import catacomb_config as cfg
from catacomb_areas import MainArea, TitleArea
from catacomb_engine import CatacombNumber, check_base, parse_numeral


class Renderer(Protocol):
    def create_visual(self, kind: str, **params) -> Any: ...

    def destroy_visual(self, handle: Any) -> None: ...


class Audio(Protocol):
    is_playing: bool

    def play(self, loop: bool = False) -> None: ...

    def stop(self) -> None: ...

    def set_volume(self, volume: float) -> None: ...


class CatacombGame:
    """
    Steps the active area once per tick. Area switches requested during
    a tick are applied at the end of it, after the old area has finished
    its step.
    """

    def __init__(
        self,
        renderer: Renderer,
        audio: Audio,
        start_number: str = cfg.START_NUMBER,
        base: int = cfg.BASE,
        allow_composite: bool = cfg.ALLOW_COMPOSITE,
    ):
        check_base(base)
        # normalise the start number, its primality is assumed
        self.start_number = str(parse_numeral(start_number, 10))
        self.base = base
        self.allow_composite = allow_composite

        self.renderer = renderer
        self.audio = audio

        self.area = None
        self._next_area = None
        self.ticks = 0

    def start(self, area=None) -> None:
        self.switch_to(area if area is not None else TitleArea())

    def new_main_area(self) -> MainArea:
        return MainArea(CatacombNumber(self.start_number, True), self.base, self.allow_composite)

    def set_area(self, area) -> None:
        self._next_area = area

    def go_to_title(self) -> None:
        self.set_area(TitleArea())

    def switch_to(self, area) -> None:
        if self.area is not None:
            self.area.on_destroy()
        cfg.log(f"Switching to {type(area).__name__}.")
        self.area = area
        area.on_create(self)

    def step(self, controls) -> None:
        self.ticks += 1
        if self.area is not None:
            self.area.step(controls)

        if self._next_area is not None:
            area, self._next_area = self._next_area, None
            self.switch_to(area)
