"""Length of Collatz sequences."""

from __future__ import annotations

import argparse
import sys


def collatz_length(n: int) -> int:
    """Return the length of the Collatz sequence beginning at `n`."""
    length = 1
    while n > 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        length += 1
    return length


def main(argv: list[str] | None = None) -> int:
    """Print the length of the Collatz sequence beginning at 11."""
    argparse.ArgumentParser(
        prog="collatz", description="Length of a Collatz sequence"
    ).parse_args(argv)
    print(f"Length: {collatz_length(11)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())