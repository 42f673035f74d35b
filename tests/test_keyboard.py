import io
import string

import pytest

from judgekit import keyboard

BORDER = "+----------+----------------+-----------------------------+"
HEADER = [
    BORDER,
    "| Keyboard | # of printable | Additionally, the following |",
    "|          |      lines     |  letter keys can be broken  |",
    BORDER,
]


def test_can_type_without_broken_keys():
    assert keyboard.can_type("hello world", "xyz") is True


def test_can_type_rejects_broken_key():
    assert keyboard.can_type("hello world", "w") is False


def test_can_type_is_case_sensitive():
    assert keyboard.can_type("Hello", "h") is True
    assert keyboard.can_type("hello", "h") is False


def test_can_type_with_no_broken_keys_always_true():
    assert keyboard.can_type("anything at all!", "") is True


def test_analyze_case_counts_lines_including_end():
    case = keyboard.analyze_case(1, "a", ["bcd", "xyz a", "END"])
    assert case.number == 1
    assert case.printable_lines == 2


def test_analyze_case_maybe_broken_excludes_known_and_typed():
    case = keyboard.analyze_case(4, "Q", ["The fox", "quick", "END"])
    assert "q" not in case.maybe_broken
    for letter in "thefox" + "end":
        assert letter not in case.maybe_broken
    # "quick" is not typeable, so its letters are not proven to work.
    for letter in "uick":
        assert letter in case.maybe_broken


def test_analyze_case_partitions_alphabet():
    broken = "abc"
    lines = ["hello", "cab", "END"]
    case = keyboard.analyze_case(2, broken, lines)
    typed = set("hello") | set("end")
    maybe = set(case.maybe_broken)
    assert maybe | typed | set(broken) == set(string.ascii_lowercase)
    assert not maybe & typed
    assert not maybe & set(broken)
    assert case.maybe_broken == "".join(sorted(case.maybe_broken))


def test_analyze_case_ignores_case():
    upper = keyboard.analyze_case(1, "X", ["Hello", "END"])
    lower = keyboard.analyze_case(1, "x", ["hello", "end"])
    assert upper == lower


def test_parse_cases_numbers_cases_and_stops_at_finish():
    text = "a\nbcd\nEND\nz\nzoo\nEND\nfinish\nq\nignored\nEND\n"
    cases = keyboard.parse_cases(io.StringIO(text))
    assert [c.number for c in cases] == [1, 2]
    assert cases[0] == keyboard.analyze_case(1, "a", ["bcd", "END"])
    assert cases[1] == keyboard.analyze_case(2, "z", ["zoo", "END"])


def test_parse_cases_finish_inside_case_is_a_text_line():
    cases = keyboard.parse_cases(["k\n", "finish\n", "END\n"])
    assert len(cases) == 1
    assert cases[0] == keyboard.analyze_case(1, "k", ["finish", "END"])


def test_parse_cases_handles_missing_end():
    cases = keyboard.parse_cases(["m", "hello"])
    assert cases == [keyboard.analyze_case(1, "m", ["hello"])]


def test_format_table_header_only_when_empty():
    assert keyboard.format_table([]) == "\n".join(HEADER) + "\n"


@pytest.mark.parametrize(
    "case",
    [
        keyboard.KeyboardCase(1, 3, "xyz"),
        keyboard.KeyboardCase(42, 100, ""),
        keyboard.KeyboardCase(123, 7, string.ascii_lowercase[:20]),
    ],
)
def test_format_table_rows_are_aligned(case):
    lines = keyboard.format_table([case]).splitlines()
    assert lines[:4] == HEADER
    row = lines[4]
    assert lines[5] == BORDER
    assert len(row) == len(BORDER)
    for index, char in enumerate(BORDER):
        if char == "+":
            assert row[index] == "|"
    assert row[1:7].strip() == str(case.number)
    assert row[12:21].strip() == str(case.printable_lines)
    assert row[30:58].strip() == case.maybe_broken


def test_solve_renders_parsed_cases():
    text = "a\nbcd\nEND\nfinish\n"
    expected = keyboard.format_table(keyboard.parse_cases(io.StringIO(text)))
    assert keyboard.solve(io.StringIO(text)) == expected


def test_main_prints_table(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("a\nbcd\nEND\nfinish\n"))
    assert keyboard.main() == 0
    out = capsys.readouterr().out.splitlines()
    assert out[:4] == HEADER
    assert len(out) == 6