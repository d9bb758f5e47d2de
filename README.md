# argkit

A small command-line argument parser. You declare integer, string and flag
arguments on an `ArgParser`, set each one up by chaining calls, parse an
argument list and then read the values back.

## Installing

```
pip install .
```

## Declaring arguments

```python
from argkit.parser import ArgParser

parser = ArgParser("My Parser")
parser.add_string_argument("input", "File path for input file", short_name="i")
parser.add_int_argument("count", "How many times").default(1)
parser.add_flag("verbose", "Print more", short_name="v")
parser.add_help("h", "help", "Reads a file and does something with it")
```

`add_int_argument`, `add_string_argument` and `add_flag` return an
`IntArgument`, `StringArgument` or `FlagArgument` (from `argkit.arguments`),
so settings can be chained:

- `multi_value(min_args_count=0)` lets an int or string argument be given
  several times; parsing fails if fewer than `min_args_count` values arrive.
- `positional()` lets bare words fill an int or string argument. Words made
  of digits go to the first positional int argument if there is one,
  anything else to the first positional string argument.
- `default(value)` gives the value used when the argument is absent; a
  repeated argument takes a list, a single one a plain value. Mixing them up
  raises `ValueError`.
- `store_value(holder)` also writes the parsed value into a
  `argkit.arguments.Holder`; `store_values(lst)` appends repeated values to a
  list you own. Calling the wrong one for a single or repeated argument
  raises `ValueError`.

```python
from argkit.arguments import Holder

name = Holder()
parser.add_string_argument("name").store_value(name)
```

Every declared argument, flags included, must either have a default or
appear on the command line, otherwise `parse` returns `False`. So a flag that
may be left out needs `.default(False)`.

## Parsing

The list passed to `parse` starts with the program name, like `sys.argv`;
the first element is skipped. `parse` returns `True` or `False`.

```python
ok = parser.parse(["app", "--input=data.txt", "-v", "--count=3"])
if ok:
    print(parser.get_string_value("input"))   # data.txt
    print(parser.get_int_value("count"))      # 3
    print(parser.get_flag("verbose"))         # True
```

Accepted forms:

- `--name=value` and `-n=value` for int and string arguments; a value that
  looks like an integer goes to a matching int argument first;
- `--name` for a flag, and `-abc` to set several flags by short name at once;
- bare values for positional arguments.

Integers are limited to the signed 32-bit range; a value outside it raises
`ValueError`, as does giving a flag a value with `=`.

The getters accept either the short or the full name and raise `ValueError`
for an unknown name. Values of a repeated argument are read by index:

```python
parser = ArgParser("Numbers")
parser.add_int_argument("N").multi_value(1).positional()
parser.parse(["app", "1", "2", "3"])
parser.get_int_value("N", 2)   # 3
```

## Help

After `add_help`, seeing the help option (`--help`, or the short form such
as `-h`) prints `help_description()` to standard output and ends parsing with
`True`; `parser.help()` then returns `True`. `help_description()` returns the
parser name, the help description and one line per argument (strings, then
flags, then integers), or an empty string if `add_help` was never called.

## Command-line tool

The package installs an `argkit` command that takes integers as positional
arguments and the flags `--sum` and `--mult`. Neither flag has a default, so
both must be given for the arguments to be accepted; the sum is then printed,
since `--sum` is checked first:

```
argkit --sum --mult 1 2 3 4 5
Result: 15
```

With only one of the flags, or with no integers, it prints `Wrong argument`
and the help text and exits with status 1. `argkit --help` prints the help
text (once while parsing and once more afterwards) and exits with status 0.

## Running the tests

```
pip install .[test]
pytest
```