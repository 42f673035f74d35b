"""Work out which lines a keyboard with broken keys can type."""

from __future__ import annotations

import string
import sys
from dataclasses import dataclass
from typing import Iterable, Sequence, TextIO

_BORDER = "+----------+----------------+-----------------------------+"
_HEADER = (
    _BORDER,
    "| Keyboard | # of printable | Additionally, the following |",
    "|          |      lines     |  letter keys can be broken  |",
    _BORDER,
)
_KEYS_COLUMN_WIDTH = 29


@dataclass(frozen=True)
class KeyboardCase:
    """Result for one keyboard: how many lines it types, which keys may be broken."""

    number: int
    printable_lines: int
    maybe_broken: str


def can_type(line: str, broken_keys: str) -> bool:
    """Return True if *line* uses none of the characters in *broken_keys*."""
    return not any(char in broken_keys for char in line)


def analyze_case(number: int, broken_keys: str, lines: Iterable[str]) -> KeyboardCase:
    """Count typeable lines and find letters not yet shown to work.

    Comparison ignores case. A letter may be broken when it is not among
    the known broken keys and appears in no typeable line.
    """
    broken = broken_keys.lower()
    typed: set[str] = set()
    printable = 0
    for line in lines:
        lowered = line.lower()
        if can_type(lowered, broken):
            printable += 1
            typed.update(lowered)
    maybe_broken = "".join(
        letter
        for letter in string.ascii_lowercase
        if letter not in typed and letter not in broken
    )
    return KeyboardCase(number, printable, maybe_broken)


def _chomp(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def parse_cases(lines: Iterable[str]) -> list[KeyboardCase]:
    """Analyse every case in *lines* up to a case that starts with "finish".

    Each case is a line of broken keys followed by text lines up to and
    including "END"; the END line counts as a text line.
    """
    cases: list[KeyboardCase] = []
    remaining = iter(lines)
    for header in remaining:
        broken_keys = _chomp(header)
        if broken_keys == "finish":
            break
        body: list[str] = []
        for raw in remaining:
            line = _chomp(raw)
            body.append(line)
            if line == "END":
                break
        cases.append(analyze_case(len(cases) + 1, broken_keys, body))
    return cases


def _format_row(case: KeyboardCase) -> str:
    keys = case.maybe_broken
    pad = max(_KEYS_COLUMN_WIDTH - len(keys), 1)
    return (
        f"|{case.number:>6}{'|':>5}"
        f"{case.printable_lines:>9}{'| ':>9}"
        f"{keys}{'|':>{pad}}"
    )


def format_table(cases: Iterable[KeyboardCase]) -> str:
    """Render the results as a bordered text table ending in a newline."""
    rows = list(_HEADER)
    for case in cases:
        rows.append(_format_row(case))
        rows.append(_BORDER)
    return "\n".join(rows) + "\n"


def solve(stream: TextIO) -> str:
    """Read all cases from *stream* and return the finished table."""
    return format_table(parse_cases(stream))


def main(argv: Sequence[str] | None = None) -> int:
    """Read cases from standard input and print the table."""
    sys.stdout.write(solve(sys.stdin))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())