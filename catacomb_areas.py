# catacomb_areas.py
# Areas with a line of doors: the title screen and the catacombs themselves

from enum import Enum, auto
from typing import Protocol

import catacomb_config as cfg
import catacomb_text as ct
from catacomb_camera import MazeCamera
from catacomb_effects import DeadEndAnimation, FadeInEffect, TorchTimer
from catacomb_engine import CatacombNumber
from catacomb_rooms import ArchEntry, BlankEntry, Entry, build_entries, largest_index, smallest_index
from catacomb_timers import Timers


class DoorSelectorArea(Protocol):
    """
    Anything the camera can walk along: a line of doors with inclusive
    index bounds, a test for entering a door and the door action itself.
    """

    @property
    def smallest_index(self) -> int: ...

    @property
    def largest_index(self) -> int: ...

    def can_enter_door(self, index: int) -> bool: ...

    def enter_door(self, index: int) -> None: ...

    def moved_to(self, index: int) -> None: ...


# ---------- MAIN AREA ----------

class MainArea:
    """
    One room of the catacombs, keyed by current_number.

    The entries are rebuilt from the number every time a door is
    entered. A composite number (or a room with nothing in it) is a
    dead end.
    """

    def __init__(
        self,
        current_number: CatacombNumber,
        base: int = cfg.BASE,
        allow_composite: bool = cfg.ALLOW_COMPOSITE,
    ):
        self.current_number = current_number
        self.base = base
        self.allow_composite = allow_composite

        self.entries: list[Entry] = []
        self.start_position = 0
        self.depth = 0

        self.game = None
        self.ambient = None
        self.camera: MazeCamera | None = None
        self.effects: list = []
        self.torch_timer: TorchTimer | None = None

        # visual handles owned by the current room layout
        self.layout: list = []

        self.torch_position = 0
        self.torch_intensity = 1.0
        self._entering = False

    # ---------- BOUNDS ----------

    @property
    def smallest_index(self) -> int:
        return smallest_index(len(self.entries))

    @property
    def largest_index(self) -> int:
        return largest_index(len(self.entries))

    @property
    def is_dead_end(self) -> bool:
        return not self.entries

    def entry_at(self, index: int) -> Entry | None:
        if not self.entries or not self.smallest_index <= index <= self.largest_index:
            return None
        return self.entries[index - self.smallest_index]

    # ---------- LIFECYCLE ----------

    def on_create(self, game) -> None:
        self.game = game
        self.ambient = game.audio

        self.torch_timer = TorchTimer(self)
        self.effects.append(self.torch_timer)
        self.effects.append(FadeInEffect())

        if not self.ambient.is_playing:
            self.ambient.play(loop=True)
            self.ambient.set_volume(cfg.AMBIENT_VOLUME)

        self.build_room()

    def on_destroy(self) -> None:
        self.dispose_layout()
        self.camera = None
        self.effects.clear()

    def build_room(self) -> None:
        self.entries, self.start_position = build_entries(
            self.current_number, self.base, self.allow_composite
        )
        self.create_layout()
        self.camera = MazeCamera(self, self.start_position)

        if self.is_dead_end:
            cfg.log(f"Dead end at {self.current_number.value}.")
            self.effects.append(DeadEndAnimation(self))

    def create_layout(self) -> None:
        renderer = self.game.renderer
        low = self.smallest_index
        value = self.current_number.value

        self.layout.append(renderer.create_visual("floor", length=max(len(self.entries), 1)))

        for i, entry in enumerate(self.entries):
            position = low + i
            if isinstance(entry, ArchEntry):
                number = entry.catacomb_number
                handle = renderer.create_visual(
                    "arch",
                    relative_position=position,
                    text=number.display(self.base),
                    value=number.value,
                )
            else:
                graffiti = None
                if entry.show_decoration:
                    graffiti = ct.pick_graffiti(ct.graffiti_seed(value, position))
                handle = renderer.create_visual(
                    "blank-wall", relative_position=position, graffiti=graffiti
                )
            self.layout.append(handle)

        if not self.entries:
            self.layout.append(
                renderer.create_visual("blank-wall", relative_position=0, graffiti=None)
            )

        self.layout.append(renderer.create_visual("side-wall", side="left", relative_position=self.smallest_index))
        self.layout.append(renderer.create_visual("side-wall", side="right", relative_position=self.largest_index))

    def dispose_layout(self) -> None:
        renderer = self.game.renderer if self.game is not None else None
        handles, self.layout = self.layout, []
        if renderer is None:
            return
        for handle in handles:
            renderer.destroy_visual(handle)

    def remove_camera(self) -> None:
        self.camera = None

    # ---------- DOOR SELECTOR ----------

    def can_enter_door(self, index: int) -> bool:
        return isinstance(self.entry_at(index), ArchEntry)

    def enter_door(self, index: int) -> None:
        if self._entering:
            cfg.log(f"Already entering a door; ignoring door {index}.")
            return

        self._entering = True
        try:
            entry = self.entry_at(index)

            # dispose before rebuild
            self.dispose_layout()
            self.camera = None

            if isinstance(entry, ArchEntry):
                self.current_number = entry.catacomb_number
                cfg.log(f"Entering door {index} -> {self.current_number.value}.")
            else:
                # should not happen with a well-behaved camera: treat as a trap
                cfg.log(f"Door {index} is not an archway. Trapped.")
                self.current_number = CatacombNumber(self.current_number.value, False)

            self.depth += 1
            if self.torch_timer is not None:
                self.torch_timer.entered_door()

            self.effects.append(FadeInEffect())
            self.build_room()
        finally:
            self._entering = False

    def moved_to(self, index: int) -> None:
        self.torch_position = index

    # ---------- TICK ----------

    @property
    def overlay_alpha(self) -> float:
        return max((getattr(e, "alpha", 0.0) for e in self.effects), default=0.0)

    def step(self, controls) -> None:
        if self.camera is not None:
            self.camera.step(controls)

        for effect in list(self.effects):
            effect.step()
            # finished fade-outs stay so the screen stays black
            if effect.finished and isinstance(effect, FadeInEffect):
                self.effects.remove(effect)


# ---------- TITLE AREA ----------

class TitleArea:
    """Title screen: a single archway that leads into the catacombs."""

    class Timer(Enum):
        TEST_FOR_MOVEMENT = auto()

    smallest_index = 0
    largest_index = 0

    def __init__(self):
        self.game = None
        self.camera: MazeCamera | None = None
        self.effects: list = []
        self.layout: list = []
        self.timers = Timers(self.on_timer)

        self.title_visible = True
        self.torch_position = 0
        self.torch_intensity = 1.0
        self._entering = False

    def on_create(self, game) -> None:
        self.game = game
        renderer = game.renderer

        self.layout.append(renderer.create_visual("floor", length=1))
        self.layout.append(renderer.create_visual("arch", relative_position=0, text="", value=""))

        self.camera = MazeCamera(self)
        self.effects.append(FadeInEffect())
        self.timers.set_countdown(TitleArea.Timer.TEST_FOR_MOVEMENT, cfg.TITLE_MOVEMENT_CHECK_TICKS, repeating=True)

    def on_destroy(self) -> None:
        self.dispose_layout()
        self.camera = None
        self.effects.clear()
        self.timers.clear_all()

    def dispose_layout(self) -> None:
        handles, self.layout = self.layout, []
        if self.game is None:
            return
        for handle in handles:
            self.game.renderer.destroy_visual(handle)

    def moved_to(self, index: int) -> None:
        self.torch_position = index

    def can_enter_door(self, index: int) -> bool:
        return index == 0

    def enter_door(self, _index: int) -> None:
        if self._entering:
            return
        self._entering = True

        self.dispose_layout()
        self.game.set_area(self.game.new_main_area())

    def on_timer(self, _timer_id) -> None:
        if self.camera is not None and self.camera.is_moving:
            self.title_visible = False

    @property
    def overlay_alpha(self) -> float:
        return max((e.alpha for e in self.effects), default=0.0)

    def step(self, controls) -> None:
        if self.camera is not None:
            self.camera.step(controls)
        self.timers.tick()

        for effect in list(self.effects):
            effect.step()
            if effect.finished:
                self.effects.remove(effect)
