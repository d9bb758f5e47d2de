"""Argument descriptions used by the parser: integers, strings and flags."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

NO_SHORT_NAME = " "


@dataclass
class Holder(Generic[T]):
    """A mutable cell that receives a parsed single value."""

    value: T | None = None


def _check_short_name(short_name: str) -> str:
    if len(short_name) != 1:
        raise ValueError(f"short name must be a single character, got {short_name!r}")
    return short_name


class _ValueArgument(Generic[T]):
    """Common behaviour of integer and string arguments."""

    _empty: Any = None

    def __init__(self, full_name: str = "", description: str = "", short_name: str = NO_SHORT_NAME) -> None:
        self.short_name = _check_short_name(short_name)
        self.full_name = full_name
        self.description = description

        self._value: T | None = self._empty
        self._values: list[T] = []
        self._target: Holder[T] | None = None
        self._targets: list[T] | None = None

        self.default_value: T | None = self._empty
        self.default_values: list[T] = []

        self.min_args_count = 1
        self.number_of_values = 0

        self.is_positional = False
        self.has_default = False
        self.is_recorded = False
        self.is_multi = False

    @property
    def is_stored(self) -> bool:
        """True when parsed values go to an outside holder or list."""
        return self._target is not None or self._targets is not None

    @property
    def value(self) -> T | None:
        """The single value, read through the holder when one is attached."""
        if self._target is not None:
            return self._target.value
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        if self._target is not None:
            self._target.value = new_value
        else:
            self._value = new_value

    @property
    def values(self) -> list[T]:
        """The list that collects repeated values."""
        if self._targets is not None:
            return self._targets
        return self._values

    def _set_multi_value(self, min_args_count: int) -> None:
        if min_args_count < 0:
            raise ValueError("minimum number of values cannot be negative")
        self.min_args_count = min_args_count
        self.is_multi = True

    def _set_store_value(self, target: Holder[T]) -> None:
        if self.is_multi:
            raise ValueError("It is not possible to store a multi-valued value in a single")
        self._target = target

    def _set_store_values(self, target: list[T]) -> None:
        if not self.is_multi:
            raise ValueError("It is not possible to store a single value in a multi-valued")
        self._targets = target

    def _set_default(self, value: T | list[T]) -> None:
        if isinstance(value, (list, tuple)):
            if not self.is_multi:
                raise ValueError("The argument is not multivalued")
            self.default_values = list(value)
            self._values = list(value)
        else:
            if self.is_multi:
                raise ValueError("It will not work to set a single value in a multi-values argument")
            self.default_value = value
            self._value = value
        self.has_default = True

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(full_name={self.full_name!r}, "
            f"short_name={self.short_name!r}, multi={self.is_multi})"
        )


class IntArgument(_ValueArgument[int]):
    """An argument holding one or several integers."""

    _empty = None

    def multi_value(self, min_args_count: int = 0) -> IntArgument:
        """Accept repeated values, requiring at least ``min_args_count`` of them."""
        self._set_multi_value(min_args_count)
        return self

    def store_value(self, target: Holder[int]) -> IntArgument:
        """Write the parsed single value into ``target``."""
        self._set_store_value(target)
        return self

    def store_values(self, target: list[int]) -> IntArgument:
        """Append parsed repeated values to ``target``."""
        self._set_store_values(target)
        return self

    def default(self, value: int | list[int]) -> IntArgument:
        """Set the value used when the argument is absent from the command line."""
        self._set_default(value)
        return self

    def positional(self) -> IntArgument:
        """Let bare command-line words fill this argument."""
        self.is_positional = True
        return self


class StringArgument(_ValueArgument[str]):
    """An argument holding one or several strings."""

    _empty = ""

    def multi_value(self, min_args_count: int = 0) -> StringArgument:
        """Accept repeated values, requiring at least ``min_args_count`` of them."""
        self._set_multi_value(min_args_count)
        return self

    def store_value(self, target: Holder[str]) -> StringArgument:
        """Write the parsed single value into ``target``."""
        self._set_store_value(target)
        return self

    def store_values(self, target: list[str]) -> StringArgument:
        """Append parsed repeated values to ``target``."""
        self._set_store_values(target)
        return self

    def default(self, value: str | list[str]) -> StringArgument:
        """Set the value used when the argument is absent from the command line."""
        self._set_default(value)
        return self

    def positional(self) -> StringArgument:
        """Let bare command-line words fill this argument."""
        self.is_positional = True
        return self


class FlagArgument:
    """A boolean switch that is set by naming it."""

    def __init__(self, full_name: str = "", description: str = "", short_name: str = NO_SHORT_NAME) -> None:
        self.short_name = _check_short_name(short_name)
        self.full_name = full_name
        self.description = description

        self._value = False
        self._target: Holder[bool] | None = None

        self.default_value = False
        self.has_default = False
        self.is_recorded = False

    @property
    def is_stored(self) -> bool:
        """True when the flag state goes to an outside holder."""
        return self._target is not None

    @property
    def value(self) -> bool:
        """The flag state, read through the holder when one is attached."""
        if self._target is not None:
            return bool(self._target.value)
        return self._value

    @value.setter
    def value(self, new_value: bool) -> None:
        if self._target is not None:
            self._target.value = new_value
        else:
            self._value = new_value

    def store_value(self, target: Holder[bool]) -> FlagArgument:
        """Write the flag state into ``target`` when the flag is seen."""
        self._target = target
        return self

    def default(self, value: bool) -> FlagArgument:
        """Set the state used when the flag is absent."""
        self._value = value
        self.default_value = value
        self.has_default = True
        return self

    def __repr__(self) -> str:
        return f"FlagArgument(full_name={self.full_name!r}, short_name={self.short_name!r})"