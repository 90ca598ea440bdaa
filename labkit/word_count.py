"""Word frequency counting with CSV output."""

from __future__ import annotations

import re
import sys
from collections import Counter
from collections.abc import Iterable
from typing import TextIO

_WORD = re.compile(r"[A-Za-z0-9]+")


def split_words(line: str) -> list[str]:
    """Split a line into lower-case words; anything but ASCII letters and digits separates."""
    return [word.lower() for word in _WORD.findall(line)]


def count_words(lines: Iterable[str]) -> tuple[dict[str, int], int]:
    """Count words over lines; return the counts ordered by word and the total."""
    counts: Counter[str] = Counter()
    for line in lines:
        counts.update(split_words(line))
    return dict(sorted(counts.items())), sum(counts.values())


def sort_by_frequency(counts: dict[str, int]) -> list[tuple[str, int]]:
    """Order words by descending count, ties in alphabetical order."""
    return sorted(sorted(counts.items()), key=lambda item: -item[1])


def write_csv(
    stream: TextIO, sorted_words: Iterable[tuple[str, int]], total: int
) -> None:
    """Write the word table with counts and percentages of the total."""
    stream.write("Word,Count,Percentage\n")
    for word, count in sorted_words:
        percentage = count * 100.0 / total
        stream.write(f"{word},{count},{percentage:.2f}\n")


def main(argv: list[str] | None = None) -> int:
    """Count words of an input file and write a CSV report."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Usage: word_count input.txt output.csv", file=sys.stderr)
        return 1
    input_path, output_path = args
    try:
        source = open(input_path, encoding="utf-8", errors="surrogateescape")
    except OSError:
        print("Error: Could not open input file.", file=sys.stderr)
        return 1
    with source:
        try:
            target = open(output_path, "w", encoding="utf-8", newline="")
        except OSError:
            print("Error: Could not open output file.", file=sys.stderr)
            return 1
        with target:
            counts, total = count_words(source)
            write_csv(target, sort_by_frequency(counts), total)
    print("CSV file created successfully.")
    return 0


if __name__ == "__main__":
    sys.exit(main())