"""By reference vs by value.

You want a collection of functions to run later in the program's life and
you want each one to remember the number it was made for. Closing over the
loop variable does not do that: every function sees the same variable, and
reads it only when called.
"""

import logging
from typing import Callable

from rich.console import Console


logger = logging.getLogger(__name__)


type Thunk = Callable[[], str]


BY_REFERENCE_BANNER = "/******************** By Reference *********************/"
BY_VALUE_BANNER = "/******************** By Value *************************/"


def cache_numbers_by_reference() -> list[Thunk]:
    nums: list[Thunk] = []

    number = 0
    while number < 10:
        # `number` is looked up when the lambda runs, after the loop is done.
        nums.append(lambda: f"I am the number {number}")
        number += 1

    logger.debug("Cached %d thunks sharing one counter", len(nums))
    return nums


def cache_numbers_by_value() -> list[Thunk]:
    nums: list[Thunk] = []

    number = 0
    while number < 10:
        # Calling the wrapper right away gives each thunk its own binding.
        nums.append(
            (lambda intended_value: lambda: f"I am the number {intended_value}")(
                number
            )
        )
        number += 1

    logger.debug("Cached %d thunks with their own values", len(nums))
    return nums


def print_numbers(nums: list[Thunk], console: Console | None = None) -> None:
    console = Console() if console is None else console
    for num in nums:
        console.print(num(), markup=False, highlight=False, emoji=False)


def run(console: Console | None = None) -> None:
    console = Console() if console is None else console

    console.print(BY_REFERENCE_BANNER, markup=False, highlight=False, emoji=False)
    print_numbers(cache_numbers_by_reference(), console)

    console.print(BY_VALUE_BANNER, markup=False, highlight=False, emoji=False)
    print_numbers(cache_numbers_by_value(), console)
