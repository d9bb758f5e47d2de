"""Command that sums or multiplies integer arguments."""

from __future__ import annotations

import math
import sys
from typing import Sequence

from .arguments import Holder
from .parser import ArgParser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the accumulate command and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)

    values: list[int] = []
    use_sum = Holder(False)
    use_mult = Holder(False)

    parser = ArgParser("Program")
    parser.add_int_argument("N").multi_value(1).positional().store_values(values)
    parser.add_flag("sum", "add args").store_value(use_sum)
    parser.add_flag("mult", "multiply args").store_value(use_mult)
    parser.add_help("h", "help", "Program accumulate arguments")

    if not parser.parse(["argkit", *args]):
        print("Wrong argument")
        print(parser.help_description())
        return 1

    if parser.help():
        print(parser.help_description())
        return 0

    if use_sum.value:
        print(f"Result: {sum(values)}")
    elif use_mult.value:
        print(f"Result: {math.prod(values)}")
    else:
        print("No one options had chosen")
        print(parser.help_description(), end="")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())