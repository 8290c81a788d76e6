"""
Prime Number Catacombs launcher.
Lights the way in with the first few archways, then offers the game,
the number probe and the explorer.
"""

import time

import pygame

import catacomb_config as cfg
import catacomb_engine
import catacomb_search
import catacomb_visual

# pause after each splash line, in seconds
TORCH_FLICKER = (0.05, 0.2, 0.1, 0.25)


def splash_lines(start: str = cfg.START_NUMBER, base: int = cfg.BASE, depth: int = 3) -> list[str]:
    """Title, then the left-most archways from start for a few rooms."""
    path, status = catacomb_search.leftmost_walk(start, base, max_steps=depth)
    lines = ["  PRIME NUMBER CATACOMBS", ""]
    for step, value in enumerate(path):
        shown = catacomb_engine.to_base_string(int(value), base)
        lines.append(f"  {'  ' * step}[{shown}]")
    if status == "dead_end":
        lines.append(f"  {'  ' * len(path)}...dead end.")
    else:
        lines.append(f"  {'  ' * len(path)}...and deeper.")
    return lines


def show_splash() -> None:
    for i, line in enumerate(splash_lines()):
        print(line)
        time.sleep(TORCH_FLICKER[i % len(TORCH_FLICKER)])
    print()


def show_menu() -> None:
    print("Where to?")
    print("  1) Walk into the catacombs")
    print("  2) Probe a number")
    print("  3) Map the catacombs (breadth-first)")
    print("  Q) Leave")


def main() -> None:
    show_splash()

    while True:
        show_menu()
        choice = input("Select an option: ").strip().lower()
        print()

        if choice == "1":
            print("Launching the catacombs...\n")
            try:
                catacomb_visual.main()
            except pygame.error:
                print(
                    "The catacombs are not available on this device. "
                    "Pygame could not open a window.\n"
                )
            else:
                print("\nReturned to launcher.\n")
        elif choice == "2":
            print("Opening number probe...\n")
            catacomb_engine.main()
            print("\nReturned to launcher.\n")
        elif choice == "3":
            start = input("Start number [2]: ").strip() or "2"
            base = input("Base [2]: ").strip() or "2"
            argv = ["--start", start, "--base", base, "--iterations", "50"]
            try:
                catacomb_search.main(argv)
            except SystemExit:
                # argparse rejected the base
                print("Bad base.\n")
            print("\nReturned to launcher.\n")
        elif choice == "q":
            print("Goodbye!")
            break
        else:
            print("Invalid choice. Please select 1, 2, 3, or Q.\n")


if __name__ == "__main__":
    main()
