# -----------------------------------------
#  catacomb_search.py
#  Search / walk utilities for the Prime Number Catacombs
#  Uses catacomb_engine as core
# -----------------------------------------

import argparse
import random
from collections import deque

import catacomb_config as cfg
import catacomb_engine as ce
from catacomb_errors import CatacombError
from catacomb_rooms import arch_candidates


# ---------- BASIC HELPERS ----------

def doors_out_of(value: str, base: int, allow_composite: bool = False) -> list[ce.CatacombNumber]:
    """
    All archways out of the room keyed by value, in ascending digit order.
    """
    extensions = ce.compute_extensions(value, base)
    return [arch.catacomb_number for arch in arch_candidates(extensions, allow_composite)]


# ---------- LEFT-MOST WALK (NO BACKTRACKING) ----------

def leftmost_walk(start: str, base: int, max_steps: int = 1000, allow_composite: bool = False):
    """
    Always take the archway with the smallest digit.
    Returns (path, status), where:
      - path  = list of decimal value strings
      - status is one of:
          "dead_end"   -> the room is composite or has no archways
          "max_steps"  -> safety cap reached
    """
    return _walk(start, base, max_steps, allow_composite, lambda doors: doors[0])


# ---------- MONTE CARLO WALK (NO BACKTRACKING) ----------

def random_walk(start: str, base: int, max_steps: int = 1000, rng=None, allow_composite: bool = False):
    """
    Random walk: at each step, choose a random archway from the current room.
    Returns (path, status) as per leftmost_walk.
    """
    if rng is None:
        rng = random
    return _walk(start, base, max_steps, allow_composite, rng.choice)


def _walk(start, base, max_steps, allow_composite, choose):
    # the start number is assumed prime
    current = ce.CatacombNumber(str(ce.parse_numeral(start)), True)
    path = []
    steps = 0

    while True:
        path.append(current.value)
        steps += 1
        if steps > max_steps:
            return path, "max_steps"

        if not current.is_prime:
            return path, "dead_end"

        doors = doors_out_of(current.value, base, allow_composite)
        if not doors:
            return path, "dead_end"

        current = choose(doors)


# ---------- BREADTH-FIRST EXPLORE ----------

def breadth_first_explore(start: str, base: int, iterations: int = 1000):
    """
    Explore the prime archways level by level from start.

    Returns a list of (value, level) in the order they were discovered,
    at most `iterations` long, and a status:
      "completed"   -> no more numbers to visit
      "iterations"  -> cap reached
    """
    start_value = str(ce.parse_numeral(start))
    visited = {start_value}
    queue = deque([(start_value, 1)])
    found: list[tuple[str, int]] = []

    while queue:
        value, level = queue.popleft()
        for door in doors_out_of(value, base):
            if door.value in visited:
                continue
            if len(found) >= iterations:
                return found, "iterations"

            visited.add(door.value)
            found.append((door.value, level))
            queue.append((door.value, level + 1))

    return found, "completed"


# ---------- COMMAND LINE ----------

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Explore the Prime Number Catacombs.")
    parser.add_argument("-s", "--start", default=cfg.START_NUMBER, help="starting number (decimal)")
    parser.add_argument("-b", "--base", type=int, default=cfg.BASE, help="numeric base (2 to 36)")
    parser.add_argument("-i", "--iterations", type=int, default=1000, help="maximum numbers to list")
    parser.add_argument("--walk", choices=("bfs", "leftmost", "random"), default="bfs")
    parser.add_argument("--allow-composite", action="store_true",
                        help="walks may step through composite archways")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    try:
        if args.walk == "bfs":
            print(f"Start: {args.start} (Level 0)")
            found, status = breadth_first_explore(args.start, args.base, args.iterations)
            for i, (value, level) in enumerate(found, start=1):
                print(f"{i}: {value} (Level {level})")
            if status == "completed":
                print("No more numbers!")
        else:
            walk = leftmost_walk if args.walk == "leftmost" else random_walk
            path, status = walk(args.start, args.base, max_steps=args.iterations,
                                allow_composite=args.allow_composite)
            for step, value in enumerate(path):
                print(f"{step}: {value} = {ce.to_base_string(int(value), args.base)}")
            print(f"\nStatus: {status}")
    except CatacombError as exc:
        print(f"Cannot explore: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
