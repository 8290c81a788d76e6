# -----------------------------------------
#  Prime Number Catacombs probe for CLI
#  Compact extension signature + ! full mode
#  Ranges: 7-19 and 7-19!, optional base: 13/10
#  Prime extensions are marked with *
# -----------------------------------------

import string
from dataclasses import dataclass

import catacomb_config as cfg
from catacomb_errors import ConfigurationError, FormatError

DIGITS = string.digits + string.ascii_uppercase

# ---------- PRIME ENGINE ----------

# deterministic Miller-Rabin witnesses: exact for n < 3.3e24
WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)


def naive_is_prime(n: int) -> bool:
    """Trial division with the 6k +/- 1 step."""
    if n <= 3:
        return n > 1
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def miller_rabin_is_prime(n: int) -> bool:
    if n < 2:
        return False
    for p in WITNESSES:
        if n % p == 0:
            return n == p

    # n - 1 = m * 2^k with m odd
    k = 0
    m = n - 1
    while m % 2 == 0:
        m //= 2
        k += 1

    for a in WITNESSES:
        b = pow(a, m, n)
        if b == 1 or b == n - 1:
            continue
        for _ in range(k - 1):
            b = pow(b, 2, n)
            if b == n - 1:
                break
        else:
            return False
    return True


def is_prime(n: int) -> bool:
    if n < cfg.PRIME_THRESHOLD:
        return naive_is_prime(n)
    return miller_rabin_is_prime(n)


# ---------- NUMERALS ----------

def check_base(base: int) -> None:
    if isinstance(base, bool) or not isinstance(base, int):
        raise ConfigurationError(f"Base must be an integer (given {base!r})")
    if not cfg.MIN_BASE <= base <= cfg.MAX_BASE:
        raise ConfigurationError(
            f"Base must be between {cfg.MIN_BASE} and {cfg.MAX_BASE} (given {base})"
        )


def parse_numeral(text: str, base: int = 10) -> int:
    """
    Parse a non-negative numeral written in base (0-9 then A-Z).
    Raises FormatError for anything else, ConfigurationError for a bad base.
    """
    check_base(base)
    cleaned = text.strip().upper()
    if not cleaned:
        raise FormatError("Empty numeral")

    value = 0
    for ch in cleaned:
        digit = DIGITS.find(ch)
        if digit < 0 or digit >= base:
            raise FormatError(f"Digit {ch!r} is not valid in base {base}: {text!r}")
        value = value * base + digit
    return value


def to_base_string(value: int, base: int) -> str:
    check_base(base)
    if value < 0:
        raise FormatError(f"Negative value {value}")
    if value == 0:
        return "0"

    digits = []
    while value:
        value, d = divmod(value, base)
        digits.append(DIGITS[d])
    return "".join(reversed(digits))


# ---------- CATACOMBS ----------

@dataclass(frozen=True)
class CatacombNumber:
    value: str       # decimal
    is_prime: bool

    @property
    def as_int(self) -> int:
        return int(self.value)

    def display(self, base: int = 10) -> str:
        """The value written in the room's base."""
        return to_base_string(self.as_int, base)


def compute_extensions(numeral: str, base: int) -> list[CatacombNumber]:
    """
    All numbers reached by appending one digit in the given base.

    numeral is the decimal string of the current value V. Returns one
    CatacombNumber per digit d in 0..base-1, in ascending digit order,
    holding V * base + d.
    """
    check_base(base)
    value = parse_numeral(numeral, 10)

    extensions = []
    for d in range(base):
        candidate = value * base + d
        extensions.append(CatacombNumber(str(candidate), is_prime(candidate)))
    return extensions


def prime_extensions(numeral: str, base: int) -> list[CatacombNumber]:
    return [c for c in compute_extensions(numeral, base) if c.is_prime]


# ---------- COMPACT SIGNATURE ----------

def print_compact_number(value: int, base: int):
    exts = compute_extensions(str(value), base)
    marked = " ".join(f"{c.value}{'*' if c.is_prime else ''}" for c in exts)
    primes = sum(1 for c in exts if c.is_prime)

    if not primes:
        print(f"( {value} )  -- dead end: {marked}")
    else:
        print(f"( {value} ) [{primes}]  {marked}")


# ---------- FULL OUTPUT ----------

def print_full_number(value: int, base: int):
    label = "prime" if is_prime(value) else "composite"
    print(f"\n--- Extensions of {value} ({label}) in base {base} "
          f"= {to_base_string(value, base)} ---\n")

    for d, c in enumerate(compute_extensions(str(value), base)):
        kind = "prime" if c.is_prime else "composite"
        print(f"d={DIGITS[d]} -> {c.display(base):>12} = {c.value}  {kind}")

    print("\n--------------------------------------\n")


# ---------- INTERACTIVE SHELL ----------

def main():
    print("\n=== Prime Number Catacombs Engine ===")
    print("Default: compact signature like  ( 5 ) [2]  10 11* ...")
    print("Add '!' at the END for full details (e.g. 13!).")
    print("Use ranges like 7-23 or 7-23!, and '/base' for another base (13/10).")
    print(f"Default base is {cfg.BASE}.")
    print("Type 'exit' to quit.\n")

    while True:
        cmd = input("Enter number or range: ").strip()

        if cmd.lower() == "exit":
            print("Goodbye.")
            break

        if not cmd:
            continue

        # ---- detect ! only at the END ----
        full_mode = False
        if "!" in cmd:
            if not cmd.endswith("!"):
                print("Unknown value or range (use 13! or 7-23!).\n")
                continue
            full_mode = True
            cmd = cmd[:-1].strip()

        cmd_clean = cmd.replace(" ", "")

        # ---- optional base ----
        base = cfg.BASE
        if "/" in cmd_clean:
            cmd_clean, base_text = cmd_clean.split("/", 1)
            try:
                base = int(base_text)
                check_base(base)
            except (ValueError, ConfigurationError):
                print(f"Bad base. Use {cfg.MIN_BASE} to {cfg.MAX_BASE}.\n")
                continue

        # ---- RANGE MODE ----
        if "-" in cmd_clean:
            parts = cmd_clean.split("-")
            if len(parts) != 2:
                print("Bad range. Use 7-19 or 7-19!.\n")
                continue
            try:
                start = parse_numeral(parts[0])
                end = parse_numeral(parts[1])
            except FormatError:
                print("Bad range. Use decimal numbers only.\n")
                continue

            if start > end:
                start, end = end, start

            for value in range(start, end + 1):
                if full_mode:
                    print_full_number(value, base)
                else:
                    print_compact_number(value, base)
            print()
            continue

        # ---- SINGLE NUMBER ----
        try:
            value = parse_numeral(cmd_clean)
        except FormatError:
            print("Unknown value or range.\n")
            continue

        if full_mode:
            print_full_number(value, base)
        else:
            print_compact_number(value, base)


if __name__ == "__main__":
    main()
