# catacomb_visual.py
# Pygame front-view for the Prime Number Catacombs

import itertools

import pygame

import catacomb_config as cfg
import catacomb_text as ct
from catacomb_areas import MainArea
from catacomb_audio import make_ambient_audio
from catacomb_camera import Direction
from catacomb_engine import check_base, parse_numeral, to_base_string
from catacomb_errors import CatacombError
from catacomb_game import CatacombGame
from catacomb_rooms import ArchEntry


# --------------- COLLABORATORS ---------------

class PygameRenderer:
    """Keeps the visuals areas create; draw_area() paints them every frame."""

    def __init__(self):
        self.visuals: dict[int, dict] = {}
        self._ids = itertools.count(1)

    def create_visual(self, kind: str, **params) -> int:
        handle = next(self._ids)
        self.visuals[handle] = {"kind": kind, **params}
        return handle

    def destroy_visual(self, handle: int) -> None:
        self.visuals.pop(handle, None)

    def of_kind(self, kind: str) -> list[dict]:
        return [v for v in self.visuals.values() if v["kind"] == kind]


KEY_DIRECTIONS = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_UP: Direction.CONFIRM,
    pygame.K_w: Direction.CONFIRM,
    pygame.K_RETURN: Direction.CONFIRM,
    pygame.K_SPACE: Direction.CONFIRM,
}


class PygameControls:
    """Keys started this frame, built from KEYDOWN events."""

    def __init__(self):
        self.started: set[Direction] = set()

    def begin_frame(self) -> None:
        self.started.clear()

    def handle_event(self, event) -> None:
        if event.type == pygame.KEYDOWN and event.key in KEY_DIRECTIONS:
            self.started.add(KEY_DIRECTIONS[event.key])

    def is_pressed(self, direction: Direction) -> bool:
        return direction in self.started


# --------------- DRAWING ---------------

def make_fonts():
    pygame.font.init()
    return {
        "title": pygame.font.SysFont("DejaVu Serif", 44, bold=True),
        "number": pygame.font.SysFont("DejaVu Sans Mono", 30, bold=True),
        "graffiti": pygame.font.SysFont("DejaVu Sans", 26, bold=True),
        "sub": pygame.font.SysFont("DejaVu Sans", 20),
        "small": pygame.font.SysFont("DejaVu Sans", 16),
    }


def scale_color(color, factor: float):
    return tuple(max(0, min(255, int(c * factor))) for c in color)


def slot_rect(screen, position: int, camera_offset: float, zoom: float) -> pygame.Rect:
    """Screen rectangle of one wall slot, seen from the camera."""
    width, height = screen.get_size()
    scale = 1.0 + zoom * 2.0
    slot_w = cfg.SLOT_WIDTH * scale
    wall_h = height * 0.62 * scale

    center_x = width / 2 + (position - camera_offset) * slot_w
    top = height * 0.42 - wall_h / 2
    return pygame.Rect(int(center_x - slot_w / 2), int(top), int(slot_w) + 1, int(wall_h))


def draw_torch(screen, x: int, y: int, lit: bool, intensity: float):
    pygame.draw.rect(screen, cfg.WALL_EDGE, (x - 4, y, 8, 26))
    if lit and intensity > 0:
        radius = int(8 + 10 * intensity)
        glow = pygame.Surface((radius * 6, radius * 6), pygame.SRCALPHA)
        pygame.draw.circle(glow, (*cfg.TORCH_COLOR, int(60 * intensity)), (radius * 3, radius * 3), radius * 3)
        screen.blit(glow, (x - radius * 3, y - radius * 3))
        pygame.draw.circle(screen, cfg.TORCH_COLOR, (x, y - 4), max(3, radius // 2))


def draw_arch(screen, fonts, rect: pygame.Rect, visual: dict, lit: bool, intensity: float):
    shade = 0.45 + 0.55 * intensity if lit else 0.35
    pygame.draw.rect(screen, scale_color(cfg.WALL_COLOR, shade), rect)
    pygame.draw.rect(screen, cfg.WALL_EDGE, rect, 2)

    arch_w = rect.width * 0.42
    arch_h = rect.height * 0.55
    opening = pygame.Rect(0, 0, int(arch_w), int(arch_h))
    opening.midbottom = rect.midbottom
    pygame.draw.rect(screen, cfg.ARCH_INSIDE_COLOR, opening)
    top = pygame.Rect(opening.left, opening.top - int(arch_w / 2), opening.width, int(arch_w))
    pygame.draw.ellipse(screen, cfg.ARCH_INSIDE_COLOR, top)

    text = visual.get("text") or ""
    if text:
        surf = fonts["number"].render(text, True, cfg.NUMBER_COLOR)
        if surf.get_width() > rect.width - 20:
            ratio = (rect.width - 20) / surf.get_width()
            surf = pygame.transform.smoothscale(
                surf, (int(surf.get_width() * ratio), max(1, int(surf.get_height() * ratio)))
            )
        surf_rect = surf.get_rect(midbottom=(rect.centerx, top.top - 10))
        screen.blit(surf, surf_rect)

    torch_y = opening.top + opening.height // 4
    draw_torch(screen, opening.left - 24, torch_y, lit, intensity)
    draw_torch(screen, opening.right + 24, torch_y, lit, intensity)


def draw_blank_wall(screen, fonts, rect: pygame.Rect, visual: dict, lit: bool, intensity: float):
    shade = 0.45 + 0.55 * intensity if lit else 0.35
    pygame.draw.rect(screen, scale_color(cfg.WALL_COLOR, shade), rect)
    pygame.draw.rect(screen, cfg.WALL_EDGE, rect, 2)

    graffiti = visual.get("graffiti")
    if graffiti:
        text, angle = graffiti
        lines = [fonts["graffiti"].render(line, True, cfg.GRAFFITI_COLOR) for line in text.split("\n")]
        block_h = sum(s.get_height() for s in lines)
        block_w = max(s.get_width() for s in lines)
        block = pygame.Surface((block_w, block_h), pygame.SRCALPHA)
        y = 0
        for surf in lines:
            block.blit(surf, ((block_w - surf.get_width()) // 2, y))
            y += surf.get_height()
        block = pygame.transform.rotate(block, angle)
        screen.blit(block, block.get_rect(center=rect.center))

    draw_torch(screen, rect.centerx, rect.top + rect.height // 4, lit, intensity)


def draw_area(screen, fonts, renderer: PygameRenderer, area):
    width, height = screen.get_size()
    screen.fill(cfg.BACKGROUND_COLOR)

    camera = area.camera
    offset = camera.offset if camera is not None else float(area.torch_position)
    zoom = camera.zoom if camera is not None else 0.0
    intensity = area.torch_intensity

    # floor
    floor_top = int(height * 0.73)
    pygame.draw.rect(screen, scale_color(cfg.FLOOR_COLOR, 0.4 + 0.6 * intensity),
                     (0, floor_top, width, height - floor_top))

    for visual in renderer.visuals.values():
        kind = visual["kind"]
        if kind not in ("arch", "blank-wall"):
            continue
        position = visual["relative_position"]
        rect = slot_rect(screen, position, offset, zoom)
        if rect.right < 0 or rect.left > width:
            continue
        lit = abs(position - area.torch_position) <= 1
        if kind == "arch":
            draw_arch(screen, fonts, rect, visual, lit, intensity)
        else:
            draw_blank_wall(screen, fonts, rect, visual, lit, intensity)

    # side walls close off both ends of the line
    for visual in renderer.of_kind("side-wall"):
        step = -1 if visual["side"] == "left" else 1
        rect = slot_rect(screen, visual["relative_position"] + step, offset, zoom)
        pygame.draw.rect(screen, cfg.BACKGROUND_COLOR, rect)

    if isinstance(area, MainArea):
        draw_room_hud(screen, fonts, area)
    elif getattr(area, "title_visible", False):
        title = fonts["title"].render("Prime Number Catacombs", True, cfg.TITLE_COLOR)
        screen.blit(title, title.get_rect(midtop=(width // 2, 20)))
        hint = fonts["small"].render("UP / ENTER to walk in. ESC to quit.", True, cfg.TEXT_DIM)
        screen.blit(hint, hint.get_rect(midbottom=(width // 2, height - 12)))

    alpha = area.overlay_alpha
    if alpha > 0:
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, int(255 * alpha)))
        screen.blit(overlay, (0, 0))


def draw_room_hud(screen, fonts, area: MainArea):
    width, height = screen.get_size()
    number = area.current_number
    shown = to_base_string(number.as_int, area.base)

    title = f"{shown}  (base {area.base})"
    if area.base != 10:
        title += f"  = {number.value}"
    screen.blit(fonts["sub"].render(title, True, cfg.TEXT_COLOR), (20, 16))

    arches = sum(1 for e in area.entries if isinstance(e, ArchEntry))
    blanks = len(area.entries) - arches
    if area.is_dead_end:
        lines = ct.dead_end_lines(number.value)
    else:
        lines = ct.room_summary(arches, blanks)
    lines.append(f"depth {area.depth}")

    for i, line in enumerate(lines):
        surf = fonts["small"].render(line, True, cfg.TEXT_DIM)
        screen.blit(surf, (20, 46 + i * 18))

    legend = "LEFT/RIGHT walk, UP / ENTER go through an archway, ESC quit."
    legend_surf = fonts["small"].render(legend, True, cfg.TEXT_DIM)
    screen.blit(legend_surf, legend_surf.get_rect(midbottom=(width // 2, height - 10)))


# --------------- MAIN LOOP ---------------

def visual_loop(start_number: str = cfg.START_NUMBER, base: int = cfg.BASE,
                allow_composite: bool = cfg.ALLOW_COMPOSITE):
    """Main pygame loop for the catacombs."""
    pygame.init()
    screen = pygame.display.set_mode((cfg.WINDOW_WIDTH, cfg.WINDOW_HEIGHT))
    pygame.display.set_caption("Prime Number Catacombs")

    fonts = make_fonts()
    clock = pygame.time.Clock()

    renderer = PygameRenderer()
    controls = PygameControls()
    game = CatacombGame(renderer, make_ambient_audio(), start_number, base, allow_composite)
    game.start()

    cfg.log("Visual catacombs started.")

    running = True
    while running:
        clock.tick(cfg.FPS)
        controls.begin_frame()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
                running = False
            else:
                controls.handle_event(event)

        game.step(controls)
        draw_area(screen, fonts, renderer, game.area)
        pygame.display.flip()

    pygame.quit()
    cfg.log("Visual catacombs ended. Goodbye.")


# --------------- ENTRY POINT ---------------

def choose_start():
    """Text prompt for start number, base and composite archways."""
    print("=== Prime Number Catacombs ===")
    print(f"Press ENTER for the defaults (start {cfg.START_NUMBER}, base {cfg.BASE}).")

    base_in = input(f"Base [{cfg.BASE}]: ").strip()
    base = cfg.BASE
    if base_in:
        try:
            base = int(base_in)
            check_base(base)
        except (ValueError, CatacombError):
            print(f"Bad base. Using default base {cfg.BASE}.")
            base = cfg.BASE

    start_in = input(f"Start number, written in base {base} [{to_base_string(int(cfg.START_NUMBER), base)}]: ").strip()
    start = cfg.START_NUMBER
    if start_in:
        try:
            start = str(parse_numeral(start_in, base))
        except CatacombError:
            print(f"Bad number. Using default {cfg.START_NUMBER}.")

    composite_in = input("Allow composite archways? [y/N]: ").strip().lower()
    allow_composite = composite_in in ("y", "yes")

    return start, base, allow_composite


def main():
    start, base, allow_composite = choose_start()
    visual_loop(start, base, allow_composite)


if __name__ == "__main__":
    main()
