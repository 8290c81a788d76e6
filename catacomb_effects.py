# catacomb_effects.py
# Timed effects that live inside an area: fades, dead ends, the torch clock

from enum import Enum, auto

import catacomb_config as cfg
from catacomb_timers import Timers


def clamp(x: float, low: float, high: float) -> float:
    return min(max(x, low), high)


class FadeOutEffect:
    """
    Fade the screen to black.

    After `delay` ticks the alpha rises by `fade` every `ticks` ticks
    until it reaches 1, then on_finish() runs once.
    """

    def __init__(self, ticks: int = 10, fade: float = 0.1, delay: int = 1):
        self.ticks = abs(ticks)
        self.fade = abs(fade)
        self.delay = max(delay, 1)
        self.alpha = 0.0
        self.fades = 0
        self.finished = False

        self.timers = Timers(self.on_timer)
        self.timers.set_countdown("fade", self.ticks + self.delay)

    def step(self) -> None:
        self.timers.tick()

    def on_timer(self, _timer_id) -> None:
        self.timers.set_countdown("fade", self.ticks, repeating=True)
        self.on_tick(self.alpha)
        self.fade_out()

    def fade_out(self) -> None:
        # multiply, do not accumulate
        self.fades += 1
        self.alpha = clamp(self.fades * self.fade, 0.0, 1.0)
        if self.alpha >= 1.0:
            self.timers.clear_countdown("fade")
            self.finished = True
            self.on_finish()

    # can be overridden
    def on_tick(self, alpha: float) -> None:
        pass

    # can be overridden
    def on_finish(self) -> None:
        pass


class FadeInEffect:
    """Start black and clear the screen over a few ticks."""

    def __init__(self, ticks: int = 15):
        self.ticks = max(ticks, 1)
        self.elapsed = 0
        self.finished = False

    @property
    def alpha(self) -> float:
        return clamp(1.0 - self.elapsed / self.ticks, 0.0, 1.0)

    def step(self) -> None:
        self.elapsed += 1
        if self.elapsed >= self.ticks:
            self.finished = True


class DeadEndAnimation(FadeOutEffect):
    """Trapped: fade the ambience out with the screen, then back to the title."""

    def __init__(self, area):
        super().__init__(cfg.DEAD_END_FADE_EVERY, cfg.DEAD_END_FADE_STEP, cfg.DEAD_END_FADE_DELAY)
        self.area = area

    def on_tick(self, alpha: float) -> None:
        self.area.ambient.set_volume((1.0 - alpha) * cfg.AMBIENT_VOLUME)

    def on_finish(self) -> None:
        self.area.ambient.stop()
        cfg.log(f"Trapped at {self.area.current_number.value}. Back to the title.")
        self.area.game.go_to_title()


class TorchTimer:
    """
    The torches slowly burn out. Every door entered buys more time;
    the clock stops while the camera is moving. When it runs out the
    camera is removed and the game restarts after a short delay.
    """

    class Timer(Enum):
        RESTART_GAME = auto()

    def __init__(self, area):
        self.area = area
        self.current_tick = cfg.TORCH_STARTING_TICKS
        self.burning = True
        self.finished = False
        self.timers = Timers(self.on_timer)

    @property
    def intensity(self) -> float:
        return clamp(self.current_tick / cfg.TORCH_MAX_TICKS, 0.0, 1.0)

    def entered_door(self) -> None:
        self.current_tick += cfg.TORCH_TICKS_PER_DOOR

    def step(self) -> None:
        self.timers.tick()
        if not self.burning:
            return

        self.area.torch_intensity = self.intensity

        camera = self.area.camera
        if camera is not None and camera.is_moving:
            return

        self.current_tick -= 1
        if self.current_tick <= 0:
            self.burning = False
            cfg.log("The torches burned out.")
            self.area.remove_camera()
            self.timers.set_countdown(TorchTimer.Timer.RESTART_GAME, cfg.TORCH_LOSE_DELAY_TICKS)

    def on_timer(self, _timer_id) -> None:
        self.finished = True
        self.area.ambient.stop()
        self.area.game.go_to_title()
