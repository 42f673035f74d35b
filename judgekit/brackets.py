"""Check strings of brackets for balance."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

_OPENING = frozenset("([{")
_MATCHING_OPEN = {")": "(", "]": "[", "}": "{"}


def is_balanced(text: str) -> bool:
    """Return True if every bracket in *text* is closed in the right order.

    Any character that is not an opening bracket is treated as a closer,
    so characters other than brackets make the string unbalanced.
    """
    stack: list[str] = []
    for char in text:
        if char in _OPENING:
            stack.append(char)
        elif not stack or _MATCHING_OPEN.get(char) != stack.pop():
            return False
    return not stack


def solve(stream: TextIO) -> list[str]:
    """Read a count followed by that many strings; answer YES or NO for each."""
    tokens = stream.read().split()
    if not tokens:
        return []
    try:
        count = int(tokens[0])
    except ValueError:
        return []
    if count <= 0:
        return []
    words = tokens[1 : 1 + count]
    # Missing strings read as empty, which are balanced.
    words.extend([""] * (count - len(words)))
    return ["YES" if is_balanced(word) else "NO" for word in words]


def main(argv: Sequence[str] | None = None) -> int:
    """Answer each case from standard input on standard output."""
    for answer in solve(sys.stdin):
        print(answer)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())