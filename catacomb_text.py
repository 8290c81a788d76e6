# catacomb_text.py
# Text templates / graffiti for the Prime Number Catacombs

from catacomb_random import pick_one, random_int, seeded_random

# All messages that can show up on a blank wall
GRAFFITI_MESSAGES: list[str] = [
    "Help!!!",
    "I'm lost",
    "Numbers...\nNothing but\nNumbers...",
    "There is\nno end",
    "No way out",
    "Some primes are\ndead ends",
    "By the time anyone reads\nthis, I'm probably dead.",
    "127 is DEATH!",
    "How is this\npossible?",
    "What is the\npattern?",
    "Composite\nIs\nDEATH",
    "Infinity!",
    "I am going\ninsane",
    "Trapped!",
    "<Prime>",  # special case: a random prime
]

PRIME_MARKER = "<Prime>"

# Primes below 1000 that can appear as graffiti
SOME_PRIMES: list[int] = [
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61,
    67, 71, 73, 79, 83, 89, 97, 101, 103, 107, 109, 113, 127, 131, 137,
    139, 149, 151, 157, 163, 167, 173, 179, 181, 191, 193, 197, 199, 211,
    223, 227, 229, 233, 239, 241, 251, 257, 263, 269, 271, 277, 281, 283,
    293, 307, 311, 313, 317, 331, 337, 347, 349, 353, 359, 367, 373, 379,
    383, 389, 397, 401, 409, 419, 421, 431, 433, 439, 443, 449, 457, 461,
    463, 467, 479, 487, 491, 499, 503, 509, 521, 523, 541, 547, 557, 563,
    569, 571, 577, 587, 593, 599, 601, 607, 613, 617, 619, 631, 641, 643,
    647, 653, 659, 661, 673, 677, 683, 691, 701, 709, 719, 727, 733, 739,
    743, 751, 757, 761, 769, 773, 787, 797, 809, 811, 821, 823, 827, 829,
    839, 853, 857, 859, 863, 877, 881, 883, 887, 907, 911, 919, 929, 937,
    941, 947, 953, 967, 971, 977, 983, 991, 997,
]

# Tilt of the graffiti in degrees
MIN_ANGLE = -12
MAX_ANGLE = 12


def graffiti_seed(room_value: str, relative_position: int) -> str:
    return f"{room_value}-Graffiti-{relative_position}"


def pick_graffiti(seed: str) -> tuple[str, int]:
    """
    Return (text, angle) for a blank wall. Same seed, same graffiti.
    """
    rng = seeded_random(seed)
    text = pick_one(GRAFFITI_MESSAGES, rng)
    if text == PRIME_MARKER:
        text = str(pick_one(SOME_PRIMES, rng))
    angle = random_int(MIN_ANGLE, MAX_ANGLE, rng)
    return text, angle


def room_summary(arches: int, blanks: int) -> list[str]:
    """
    Return a list of lines describing the room.
    """
    if arches == 0:
        return ["There are no archways here. Dead end."]

    if arches == 1:
        lines = ["There is only one way forward from here."]
    else:
        lines = [f"There are {arches} archways in this room."]

    if blanks == 1:
        lines.append("One of the walls is blank.")
    elif blanks > 1:
        lines.append(f"{blanks} of the walls are blank.")

    return lines


def dead_end_lines(value: str) -> list[str]:
    return [
        f"{value} is not prime.",
        "The torches flicker. There is no way out.",
    ]
