"""Shared state of the dining table: forks, philosophers and the log."""

from __future__ import annotations

import enum
import sys
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from philosophers.parsing import Settings

C_DEAD = "\033[1;31m"
C_SLEEP = "\033[1;33m"
C_THINK = "\033[1;34m"
C_FORK = "\033[1;37m"
C_EAT = "\033[1;35m"
C_BLUE = "\033[1;36m"
C_RESET = "\033[0m"


class Status(enum.Enum):
    THINKING = enum.auto()
    EATING = enum.auto()
    SLEEPING = enum.auto()
    DEAD = enum.auto()


def now_ms() -> int:
    """Wall-clock time in milliseconds."""
    return time.time_ns() // 1_000_000


def fork_indices(index: int, count: int) -> tuple[int, int]:
    """Return (first, second) fork indices for the philosopher at ``index``.

    Even seats pick their own fork first, odd seats their neighbour's.
    """
    neighbour = (index + 1) % count
    if index % 2 == 0:
        return index, neighbour
    return neighbour, index


@dataclass(eq=False)
class Philosopher:
    """One seat at the table."""

    id: int
    time_to_die: int
    left_fork: threading.Lock
    right_fork: threading.Lock
    last_meal: int = 0
    nb_eats: int = 0
    status: Status = Status.EATING
    holds_left: bool = False
    holds_right: bool = False

    def is_starving(self, now: int) -> bool:
        """True once more than time_to_die has passed since the last meal."""
        return now - self.last_meal > self.time_to_die


class Table:
    """Forks, philosophers and the synchronised status log."""

    def __init__(
        self,
        settings: Settings,
        out: TextIO | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.clock = clock if clock is not None else now_ms
        self.message_lock = threading.Lock()
        self.dead_lock = threading.Lock()
        self.ready_lock = threading.Lock()
        self.finished_lock = threading.Lock()
        self.nb_philo_ready = 0
        self.nb_philo_finished = 0
        self.philo_dead = False
        self.start_meal = self.clock()
        self.forks = [threading.Lock() for _ in range(settings.nb_philo)]
        self.philosophers = []
        for index in range(settings.nb_philo):
            first, second = fork_indices(index, settings.nb_philo)
            self.philosophers.append(
                Philosopher(
                    id=index + 1,
                    time_to_die=settings.time_to_die,
                    left_fork=self.forks[first],
                    right_fork=self.forks[second],
                    last_meal=self.start_meal,
                )
            )

    def __enter__(self) -> Table:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def elapsed(self) -> int:
        """Milliseconds since the meal started."""
        return self.clock() - self.start_meal

    def print_status(self, philosopher_id: int, message: str, color: str) -> bool:
        """Log a status line; return False if someone has already died."""
        with self.message_lock:
            if self.philo_dead:
                stamp = self.elapsed() + self.settings.time_to_die
                self.out.write(
                    f"{C_DEAD} {stamp} {philosopher_id} {message} {C_RESET}\n"
                )
                self.out.flush()
                return False
            stamp = self.elapsed()
            self.out.write(f"{color} {stamp} {philosopher_id} {message} {C_RESET}\n")
            self.out.flush()
            return True

    def check_dead(self, philosopher: Philosopher) -> bool:
        """Return True if the meal is over, declaring ``philosopher`` dead if starving."""
        with self.dead_lock:
            if self.philo_dead:
                return True
            if philosopher.is_starving(self.clock()):
                philosopher.status = Status.DEAD
                self.philo_dead = True
                self.print_status(philosopher.id, "died", C_DEAD)
                return True
            return False

    def close(self) -> None:
        """Release every fork still held by a philosopher."""
        for philosopher in self.philosophers:
            if philosopher.holds_left:
                philosopher.holds_left = False
                if philosopher.left_fork.locked():
                    philosopher.left_fork.release()
            if philosopher.holds_right:
                philosopher.holds_right = False
                if philosopher.right_fork.locked():
                    philosopher.right_fork.release()