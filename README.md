# judgekit

Three online-judge exercises. Each one can be used as a library and as a
command that reads its input from standard input and writes its answer to
standard output. The commands take no options.

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Commands

### Balanced brackets

```
judgekit-brackets < input.txt
```

The first token is the number of strings. Each following whitespace-separated
token is one string of `()`, `[]` and `{}`. For each, the command prints `YES`
if the brackets are balanced and `NO` otherwise. Any character that is not an
opening bracket is treated as a closing one, so other characters make a string
unbalanced. If fewer strings follow than the count says, the missing ones count
as empty and so as balanced. Input with no count, or a count that is not a
positive number, produces no output.

### Broken keyboard

```
judgekit-keyboard < input.txt
```

Each case starts with a line listing the broken keys, followed by lines of
text up to and including a line `END`. The `END` line counts as a text line.
A line `finish` in place of a broken-keys line ends the input, and so does the
end of the stream. Upper and lower case are treated alike.

The command prints a bordered table. Each keyboard gets one row with its case
number, the number of lines that can be typed without any broken key, and the
letters that may also be broken: those that are not among the listed broken
keys and appear in no typeable line.

### Ferry loading

```
judgekit-ferry < input.txt
```

The first number is the number of cases. Each case gives the ferry length in
metres and the number of cars. Then, for each car, it gives the car's length
in centimetres and its bank (`right`, or anything else for the left bank).

The ferry starts on the left bank. On each crossing it loads cars from the
front of the queue on its side, in arrival order, while they fit, and then
crosses. The command prints the number of crossings needed to carry every car.

Input that ends before all cases are read raises `ValueError`. So does a car
longer than the ferry, which could never be carried.

## Library use

```python
from judgekit.brackets import is_balanced
from judgekit.keyboard import analyze_case, format_table
from judgekit.ferry import count_trips

is_balanced("{[()]}")                              # True
count_trips(20, [(380, "left"), (720, "right")])   # 2

case = analyze_case(1, "a", ["hello world", "END"])
print(format_table([case]))
```

- `judgekit.brackets`: `is_balanced(text)`, `solve(stream)` (a list of
  `"YES"`/`"NO"` strings) and `main(argv=None)`.
- `judgekit.keyboard`: the `KeyboardCase` dataclass, with `number`,
  `printable_lines` and `maybe_broken`. The module also has
  `can_type(line, broken_keys)`, `analyze_case(number, broken_keys, lines)`,
  `parse_cases(lines)` (a list of `KeyboardCase`), `format_table(cases)`
  (the table as a string), `solve(stream)` and `main(argv=None)`.
- `judgekit.ferry`: `load_trip(queue, capacity)`, which takes cars off the
  front of a `collections.deque` of lengths and returns the total loaded;
  `count_trips(ferry_length_m, cars)`; `solve(stream)` (a list of crossing
  counts); and `main(argv=None)`.

Each `main` is the function its command calls.