"""Command-line argument validation for the dining philosophers simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

INT_MAX = 2**31 - 1
_WHITESPACE = " \t\n\v\f\r"


class ArgumentError(ValueError):
    """Raised when the simulation arguments are missing or malformed."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    num_philos: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    num_meals: int = -1


def is_valid_number(text: str) -> bool:
    """Return True if *text* is a non-negative integer that fits in an int.

    Leading whitespace and a single sign are allowed; anything after the
    digits, including trailing whitespace, is not.
    """
    if not text:
        return False
    body = text.lstrip(_WHITESPACE)
    digits = body[1:] if body[:1] in ("-", "+") else body
    if not digits or not all("0" <= ch <= "9" for ch in digits):
        return False
    signed = body[:1] in ("-", "+")
    if len(body) >= 12 or (len(body) == 11 and not signed):
        return False
    value = int(body)
    return 0 <= value <= INT_MAX


def parse_arguments(args: Sequence[str]) -> Settings:
    """Validate the command-line arguments (without the program name)."""
    if len(args) not in (4, 5):
        raise ArgumentError("Wrong number of arguments.")
    if not all(is_valid_number(arg) for arg in args):
        raise ArgumentError("Invalid arguments.")
    values = [int(arg) for arg in args]
    num_philos, time_to_die, time_to_eat, time_to_sleep = values[:4]
    num_meals = values[4] if len(values) == 5 else -1
    return Settings(num_philos, time_to_die, time_to_eat, time_to_sleep, num_meals)