"""Knuth-Morris-Pratt substring search reporting every, possibly overlapping, match."""

from __future__ import annotations

import sys

SAMPLE_TEXT = "asdababab"
SAMPLE_PATTERN = "abab"


def failure_table(pattern: str) -> list[int]:
    """Return, for each prefix of pattern, the length of its longest proper border."""
    table = [0] * len(pattern)
    matched = 0
    for position, ch in enumerate(pattern[1:], start=1):
        while matched and pattern[matched] != ch:
            matched = table[matched - 1]
        if pattern[matched] == ch:
            matched += 1
        table[position] = matched
    return table


def find_all(text: str, pattern: str) -> list[int]:
    """Return the start index of every occurrence of pattern in text, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    table = failure_table(pattern)
    positions: list[int] = []
    matched = 0
    for index, ch in enumerate(text):
        while matched and pattern[matched] != ch:
            matched = table[matched - 1]
        if pattern[matched] == ch:
            matched += 1
        if matched == len(pattern):
            positions.append(index - matched + 1)
            matched = table[matched - 1]
    return positions


def main(argv: list[str] | None = None) -> int:
    """Search a text for a pattern (the sample pair by default) and print the matches."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        text, pattern = SAMPLE_TEXT, SAMPLE_PATTERN
    elif len(args) == 2:
        text, pattern = args
    else:
        print("usage: kmp [TEXT PATTERN]", file=sys.stderr)
        return 2
    try:
        positions = find_all(text, pattern)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print("---------final:-------------")
    print(f"count: {len(positions)}")
    for position in positions:
        print(f"position: {position}")
    return 0


if __name__ == "__main__":
    sys.exit(main())