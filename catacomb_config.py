# -----------------------------------------
#  catacomb_config.py
#  Tunable constants for the Prime Number Catacombs
# -----------------------------------------

DEBUG_LOG_TO_CONSOLE = False  # keep console quiet by default


def log(message: str) -> None:
    """Conditional logger so the game can stay silent by default."""
    if DEBUG_LOG_TO_CONSOLE:
        print(f"[Catacombs] {message}")


# ---------- GAME RULES ----------

START_NUMBER = "2"        # decimal, its primality is assumed
BASE = 2
MIN_BASE = 2
MAX_BASE = 36
ALLOW_COMPOSITE = False   # composite archways lead to dead ends

# chance that a blank wall carries graffiti
DECORATION_PROBABILITY = 0.5

# below this the primality test is plain trial division
PRIME_THRESHOLD = 1_000_000

# ---------- CAMERA (ticks) ----------

MOVEMENT_DELAY_TICKS = 10
MOVING_SPEED_TICKS = 40
ZOOM_SPEED_TICKS = 80

# ---------- EFFECTS (ticks) ----------

FPS = 30

TORCH_STARTING_TICKS = 3 * 60 * FPS   # 3 minutes
TORCH_MAX_TICKS = 3 * 60 * FPS
TORCH_TICKS_PER_DOOR = 5 * FPS
TORCH_LOSE_DELAY_TICKS = 5 * FPS

DEAD_END_FADE_EVERY = 10
DEAD_END_FADE_STEP = 0.05
DEAD_END_FADE_DELAY = 5 * FPS

TITLE_MOVEMENT_CHECK_TICKS = 11

AMBIENT_VOLUME = 0.4

# ---------- WINDOW ----------

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720

BACKGROUND_COLOR = (6, 5, 4)
FLOOR_COLOR = (38, 30, 22)
WALL_COLOR = (92, 72, 50)
WALL_EDGE = (40, 30, 20)
ARCH_INSIDE_COLOR = (12, 9, 6)
TEXT_COLOR = (230, 220, 200)
TEXT_DIM = (150, 140, 120)
NUMBER_COLOR = (112, 80, 36)
GRAFFITI_COLOR = (180, 40, 30)
TORCH_COLOR = (255, 208, 80)
TITLE_COLOR = (156, 115, 0)

SLOT_WIDTH = 420          # on-screen width of one relative position
