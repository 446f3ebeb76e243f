"""Command-line argument parsing for the dining philosophers simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from philosophers.table import C_BLUE, C_DEAD, C_EAT, C_RESET, C_SLEEP

INT_MAX = 2147483647
MAX_PHILOSOPHERS = 200

USAGE = (
    f"{C_BLUE}[nb_philosophers] "
    f"{C_DEAD}[time_to_die] "
    f"{C_EAT}[time_to_eat] "
    f"{C_SLEEP}[time_to_sleep] "
    f"{C_EAT}[nb_meal]{C_RESET}"
)


class ArgumentError(ValueError):
    """Raised when the program arguments are missing or invalid."""


@dataclass(frozen=True)
class Settings:
    """Validated simulation parameters, times in milliseconds."""

    nb_philo: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    nb_meals: int = 0


def philo_atoi(text: str) -> int:
    """Parse an unsigned decimal; return -1 on a non-digit or on overflow."""
    result = 0
    for char in text:
        if not "0" <= char <= "9":
            return -1
        result = result * 10 + (ord(char) - ord("0"))
        if result > INT_MAX:
            return -1
    return result


def validate_argument(text: str, label: str) -> int:
    """Return the positive value of ``text`` or raise ArgumentError."""
    value = philo_atoi(text)
    if value == 0:
        raise ArgumentError(f"{label} cannot be 0")
    if value == -1:
        raise ArgumentError(f"invalid {label}")
    return value


def parse_arguments(args: Sequence[str]) -> Settings:
    """Validate the four or five program arguments and build Settings."""
    if not 4 <= len(args) <= 5:
        raise ArgumentError(USAGE)
    if philo_atoi(args[0]) > MAX_PHILOSOPHERS:
        raise ArgumentError(
            f"number of philosophers must be <= {MAX_PHILOSOPHERS}"
        )
    nb_philo = validate_argument(args[0], "number of philo")
    time_to_die = validate_argument(args[1], "time to die")
    time_to_eat = validate_argument(args[2], "time to eat")
    time_to_sleep = validate_argument(args[3], "time to sleep")
    nb_meals = 0
    if len(args) == 5:
        nb_meals = validate_argument(args[4], "number of meal per philosopher")
    return Settings(nb_philo, time_to_die, time_to_eat, time_to_sleep, nb_meals)