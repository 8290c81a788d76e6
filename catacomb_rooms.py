# catacomb_rooms.py
# Builds the line of archways and blank walls for one catacomb room

import math
from dataclasses import dataclass
from typing import Union

import catacomb_config as cfg
import catacomb_engine as ce
from catacomb_engine import CatacombNumber
from catacomb_random import random_int, seeded_random, shuffle


@dataclass(frozen=True)
class ArchEntry:
    """An archway leading to the room keyed by catacomb_number."""
    catacomb_number: CatacombNumber


@dataclass(frozen=True)
class BlankEntry:
    """A wall you cannot walk through, maybe with graffiti on it."""
    show_decoration: bool


Entry = Union[ArchEntry, BlankEntry]


# ---------- RELATIVE INDEX ----------

def smallest_index(count: int) -> int:
    return -math.floor(max(count - 1, 0) / 2)


def largest_index(count: int) -> int:
    return math.ceil(max(count - 1, 0) / 2)


def relative_positions(count: int) -> list[int]:
    """Relative position of each entry, left to right."""
    low = smallest_index(count)
    return [low + i for i in range(count)]


# ---------- ROOM BUILDING ----------

def arch_candidates(
    extensions: list[CatacombNumber],
    allow_composite: bool,
) -> list[ArchEntry]:
    if allow_composite:
        keep = [c for c in extensions if c.value != "0"]
    else:
        keep = [c for c in extensions if c.is_prime]
    return [ArchEntry(c) for c in keep]


def build_entries(
    current: CatacombNumber,
    base: int,
    allow_composite: bool = cfg.ALLOW_COMPOSITE,
) -> tuple[list[Entry], int]:
    """
    Returns: (entries, start_position)

    The layout depends only on (current.value, base, allow_composite).
    Two streams are used: "<value>-Entries" picks the blank walls and
    the order, "<value>-Start" picks where the camera starts. A
    composite current number is a dead end with no entries.
    """
    if not current.is_prime:
        return [], 0

    extensions = ce.compute_extensions(current.value, base)
    if not extensions:
        return [], 0

    arches = arch_candidates(extensions, allow_composite)

    entries_rng = seeded_random(f"{current.value}-Entries")
    num_blanks = random_int(0, math.ceil(len(arches) / 2), entries_rng)
    blanks = [
        BlankEntry(entries_rng() < cfg.DECORATION_PROBABILITY)
        for _ in range(num_blanks)
    ]

    entries: list[Entry] = [*arches, *blanks]
    shuffle(entries, entries_rng)

    start_rng = seeded_random(f"{current.value}-Start")
    start = random_int(smallest_index(len(entries)), largest_index(len(entries)), start_rng)

    cfg.log(
        f"Room {current.value} (base {base}): {len(arches)} arches, "
        f"{num_blanks} blank walls, start at {start}"
    )
    return entries, start
