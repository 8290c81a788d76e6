# catacomb_camera.py
# Camera that walks left and right along the wall and zooms into archways

from enum import Enum, auto
from typing import Protocol

import catacomb_config as cfg
from catacomb_timers import Timers


class Direction(Enum):
    LEFT = auto()
    RIGHT = auto()
    CONFIRM = auto()


class Controls(Protocol):
    """Input snapshot, sampled once per tick."""

    def is_pressed(self, direction: Direction) -> bool: ...


class CameraState(Enum):
    IDLE = auto()
    MOVING_LEFT = auto()
    MOVING_RIGHT = auto()
    ZOOMING_IN = auto()


class Timer(Enum):
    CLEAR_MOVEMENT_DELAY = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    ZOOM_IN = auto()


class MazeCamera:
    """
    Per-tick navigation controller for one room.

    Input is only read while idle. A move takes MOVING_SPEED_TICKS ticks
    and shifts relative_position by one; a zoom takes ZOOM_SPEED_TICKS
    ticks and then enters the door, after which the camera is finished.
    The bounds come from the door selector it belongs to.
    """

    def __init__(self, door_selector, relative_position: int = 0):
        self.door_selector = door_selector
        self.relative_position = relative_position
        self.state = CameraState.IDLE
        self.finished = False

        # non-zero while animating (or during the startup delay)
        self.moving_tick = 1

        self.timers = Timers(self.on_timer)
        self.timers.set_countdown(Timer.CLEAR_MOVEMENT_DELAY, cfg.MOVEMENT_DELAY_TICKS)

        # indicate the starting position
        self.door_selector.moved_to(self.relative_position)

    @property
    def is_moving(self) -> bool:
        return self.moving_tick != 0

    @property
    def animation_progress(self) -> int:
        return self.moving_tick

    @property
    def offset(self) -> float:
        """Fractional relative position, for drawing mid-move."""
        if self.state == CameraState.MOVING_LEFT:
            return self.relative_position - (self.moving_tick - 1) / cfg.MOVING_SPEED_TICKS
        if self.state == CameraState.MOVING_RIGHT:
            return self.relative_position + (self.moving_tick - 1) / cfg.MOVING_SPEED_TICKS
        return float(self.relative_position)

    @property
    def zoom(self) -> float:
        """0.0 standing back, 1.0 inside the archway."""
        if self.state != CameraState.ZOOMING_IN:
            return 0.0
        if self.finished:
            return 1.0
        return min((self.moving_tick - 1) / cfg.ZOOM_SPEED_TICKS, 1.0)

    # ---------- INPUT ----------

    def step(self, controls: Controls) -> None:
        if self.finished:
            return

        if not self.is_moving:
            selector = self.door_selector
            position = self.relative_position

            if controls.is_pressed(Direction.LEFT) and position > selector.smallest_index:
                self.start(CameraState.MOVING_LEFT, Timer.MOVE_LEFT)
            elif controls.is_pressed(Direction.RIGHT) and position < selector.largest_index:
                self.start(CameraState.MOVING_RIGHT, Timer.MOVE_RIGHT)
            elif controls.is_pressed(Direction.CONFIRM) and selector.can_enter_door(position):
                self.start(CameraState.ZOOMING_IN, Timer.ZOOM_IN)

        self.timers.tick()

    def start(self, state: CameraState, timer: Timer) -> None:
        self.state = state
        self.moving_tick = 1
        self.timers.set_countdown(timer, 1, repeating=True)

    # ---------- TIMERS ----------

    def on_timer(self, timer: Timer) -> None:
        if timer == Timer.CLEAR_MOVEMENT_DELAY:
            self.moving_tick = 0
        elif timer == Timer.MOVE_LEFT:
            self.move_tick(timer, -1)
        elif timer == Timer.MOVE_RIGHT:
            self.move_tick(timer, +1)
        elif timer == Timer.ZOOM_IN:
            self.zoom_tick()

    def move_tick(self, timer: Timer, step: int) -> None:
        self.moving_tick += 1
        if self.moving_tick <= cfg.MOVING_SPEED_TICKS:
            return

        self.relative_position += step
        self.moving_tick = 0
        self.state = CameraState.IDLE
        self.timers.clear_countdown(timer)

        self.door_selector.moved_to(self.relative_position)

    def zoom_tick(self) -> None:
        self.moving_tick += 1
        if self.moving_tick <= cfg.ZOOM_SPEED_TICKS:
            return

        # terminal: the room replaces this camera while entering the door
        self.finished = True
        self.timers.clear_all()
        self.door_selector.enter_door(self.relative_position)
