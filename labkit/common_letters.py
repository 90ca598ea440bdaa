"""Characters shared by every word of a text."""

from __future__ import annotations

import sys
from collections.abc import Iterable


def common_letters(words: Iterable[str]) -> str:
    """Return the characters present in every word, in sorted order."""
    common: set[str] | None = None
    for word in words:
        letters = set(word)
        common = letters if common is None else common & letters
    return "".join(sorted(common or ()))


def main(argv: list[str] | None = None) -> int:
    """Read words from standard input and print their common characters."""
    print("To stop output, press ctrl+D", flush=True)
    print(common_letters(sys.stdin.read().split()))
    return 0


if __name__ == "__main__":
    sys.exit(main())