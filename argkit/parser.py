"""Command-line parser built from integer, string and flag arguments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

from .arguments import NO_SHORT_NAME, FlagArgument, IntArgument, StringArgument

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_DIGITS = frozenset("0123456789")

_ValueArg = Union[IntArgument, StringArgument]
_AnyArg = Union[IntArgument, StringArgument, FlagArgument]


def _is_digits(text: str) -> bool:
    """True when every character is an ASCII digit (also for empty text)."""
    return all(ch in _DIGITS for ch in text)


def _is_integer_text(text: str) -> bool:
    return _is_digits(text) or (text.startswith("-") and _is_digits(text[1:]))


def _to_int(text: str) -> int:
    """Convert text to a 32-bit signed integer."""
    try:
        number = int(text)
    except ValueError:
        raise ValueError(f"{text!r} is not an integer") from None
    if not _INT_MIN <= number <= _INT_MAX:
        raise ValueError(f"{text!r} is out of the integer range")
    return number


def _matches(argument: _AnyArg, name: str) -> bool:
    return (len(name) == 1 and argument.short_name == name) or argument.full_name == name


def _record(argument: _ValueArg, value: int | str) -> None:
    if argument.is_multi:
        argument.values.append(value)
        argument.number_of_values += 1
    else:
        argument.value = value
    argument.is_recorded = True


def _format_default(argument: _ValueArg) -> str:
    if argument.is_multi:
        return ", ".join(str(item) for item in argument.default_values)
    return str(argument.default_value)


@dataclass
class _HelpOption:
    short_name: str = ""
    full_name: str = ""
    description: str = ""
    enabled: bool = False
    found: bool = False


class ArgParser:
    """Parses a command line against declared integer, string and flag arguments."""

    def __init__(self, name: str, description: str = "") -> None:
        self.name = name
        self.description = description
        self._ints: list[IntArgument] = []
        self._strings: list[StringArgument] = []
        self._flags: list[FlagArgument] = []
        self._help = _HelpOption()

    # Declaring arguments

    def add_int_argument(self, full_name: str, description: str = "", short_name: str = NO_SHORT_NAME) -> IntArgument:
        """Declare an integer argument and return it for further setup."""
        argument = IntArgument(full_name, description, short_name)
        self._ints.append(argument)
        return argument

    def add_string_argument(
        self, full_name: str, description: str = "", short_name: str = NO_SHORT_NAME
    ) -> StringArgument:
        """Declare a string argument and return it for further setup."""
        argument = StringArgument(full_name, description, short_name)
        self._strings.append(argument)
        return argument

    def add_flag(self, full_name: str, description: str = "", short_name: str = NO_SHORT_NAME) -> FlagArgument:
        """Declare a flag and return it for further setup."""
        argument = FlagArgument(full_name, description, short_name)
        self._flags.append(argument)
        return argument

    # Reading values

    @staticmethod
    def _value_of(arguments: Sequence[_ValueArg], name: str, index: int):
        for argument in arguments:
            if not _matches(argument, name):
                continue
            if not argument.is_multi:
                return argument.value
            if argument.number_of_values >= argument.min_args_count:
                values = argument.values
                if index >= len(values):
                    raise ValueError("The index is too large. There is no element with such an index.")
                return values[index]
            if not argument.has_default:
                raise ValueError(
                    "The default value is not set and the number of values is less than the min number of values"
                )
            if index >= len(argument.default_values):
                raise ValueError("The index is too large. There is no element with such an index.")
            return argument.default_values[index]
        raise ValueError(f"There is no value with name {name}")

    def get_int_value(self, name: str, index: int = 0) -> int | None:
        """Return the integer stored under a short or full name."""
        return self._value_of(self._ints, name, index)

    def get_string_value(self, name: str, index: int = 0) -> str | None:
        """Return the string stored under a short or full name."""
        return self._value_of(self._strings, name, index)

    def get_flag(self, name: str) -> bool:
        """Return the state of the flag with a short or full name."""
        for flag in self._flags:
            if _matches(flag, name):
                return flag.value
        raise ValueError(f"There is no value with name {name}")

    # Help

    def add_help(self, short_name: str, full_name: str, description: str) -> None:
        """Enable a help option with the given names."""
        self._help.short_name = short_name
        self._help.full_name = full_name
        self._help.description = description
        self._help.enabled = True

    def help_description(self) -> str:
        """Return the help text, or an empty string when help is not enabled."""
        if not self._help.enabled:
            return ""
        lines = [f"{self.name}\n{self._help.description}\n"]

        for argument in self._strings:
            line = f"-{argument.short_name}, --{argument.full_name}=<string> {argument.description}"
            if argument.is_multi:
                line += f" [repeated, min args = {argument.min_args_count}]"
            if argument.has_default:
                line += f"[default = {_format_default(argument)}]"
            lines.append(line + "\n")

        for flag in self._flags:
            line = f"-{flag.short_name}, --{flag.full_name}=<flag> {flag.description}"
            if flag.has_default:
                line += f"[default = {int(flag.default_value)}]"
            lines.append(line + "\n")

        for argument in self._ints:
            line = f"-{argument.short_name}, --{argument.full_name}=<int> {argument.description}"
            if argument.is_multi:
                line += f" [repeated, min args = {argument.min_args_count}]"
            if argument.has_default:
                line += f"[default = {_format_default(argument)}]"
            lines.append(line + "\n")

        return "".join(lines)

    def help(self) -> bool:
        """True when the help option was seen during parsing."""
        return self._help.found

    # Parsing

    def _add_with_equals(self, text: str) -> bool:
        eq = text.index("=")
        value = text[eq + 1 :]
        name = text[2:eq]

        if _is_integer_text(value):
            for argument in self._ints:
                if _matches(argument, name):
                    _record(argument, _to_int(value))
                    return True

        for argument in self._strings:
            if _matches(argument, name):
                _record(argument, value)
                return True

        if any(_matches(flag, name) for flag in self._flags):
            raise ValueError("It is not possible to set the value of the flag in this way")
        return False

    def _add_help(self, text: str) -> bool:
        name = text[2:]
        if (self._help.enabled and name == self._help.full_name) or name == self._help.short_name:
            self._help.found = True
            return True
        return False

    def _set_flag(self, flag: FlagArgument) -> None:
        flag.value = True
        flag.is_recorded = True

    def _add_long_flag(self, text: str) -> bool:
        name = text[2:]
        for flag in self._flags:
            if _matches(flag, name):
                self._set_flag(flag)
                return True
        return False

    def _add_short_flags(self, text: str) -> bool:
        valid = False
        for char in text[1:]:
            for flag in self._flags:
                if char == flag.short_name:
                    self._set_flag(flag)
                    valid = True
            if not valid:
                return False
        return True

    def _add_int_positional(self, text: str) -> bool:
        argument = next((arg for arg in self._ints if arg.is_positional), None)
        if argument is None:
            return False
        _record(argument, _to_int(text))
        return True

    def _add_string_positional(self, text: str) -> bool:
        argument = next((arg for arg in self._strings if arg.is_positional), None)
        if argument is None:
            return False
        _record(argument, text)
        return True

    def _add_positional(self, text: str) -> bool:
        if _is_digits(text[1:]):
            return self._add_int_positional(text) or self._add_string_positional(text)
        return self._add_string_positional(text)

    def _all_set(self) -> bool:
        for argument in (*self._ints, *self._strings):
            if argument.is_multi and argument.number_of_values < argument.min_args_count:
                return False
            if not argument.has_default and not argument.is_recorded:
                return False
        return all(flag.has_default or flag.is_recorded for flag in self._flags)

    def _show_help(self) -> bool:
        print(self.help_description())
        return True

    def parse(self, argv: Sequence[str]) -> bool:
        """Parse a full argument vector, program name first.

        Returns False when the command line does not fit the declared
        arguments; raises ValueError on malformed values.
        """
        for text in argv[1:]:
            if not text.startswith("-"):
                if not self._add_positional(text):
                    return False
                continue

            if text in ("-", "--"):
                return False

            if text[1] == "-":
                if "=" in text:
                    if not self._add_with_equals(text) and not self._add_string_positional(text):
                        return False
                else:
                    if self._add_help(text):
                        return self._show_help()
                    if not self._add_long_flag(text) and not self._add_string_positional(text):
                        return False
            else:
                if "=" in text:
                    if not self._add_with_equals("-" + text) and not self._add_string_positional(text):
                        return False
                else:
                    if self._add_help("-" + text):
                        return self._show_help()
                    if not self._add_short_flags(text) and not self._add_positional(text):
                        return False

        return self._all_set()