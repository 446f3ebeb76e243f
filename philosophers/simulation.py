"""Running the dining philosophers: one thread per philosopher."""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Sequence

from philosophers.parsing import ArgumentError, parse_arguments
from philosophers.table import (
    C_DEAD,
    C_EAT,
    C_FORK,
    C_SLEEP,
    C_THINK,
    Philosopher,
    Status,
    Table,
)

_STAGGER_MS = 1


def _pause(milliseconds: float) -> None:
    time.sleep(milliseconds / 1000)


class Simulation:
    """Drives the philosophers seated at a table until the meal ends."""

    def __init__(self, table: Table) -> None:
        self.table = table
        self.threads: list[threading.Thread] = []

    def take_forks(self, philosopher: Philosopher) -> bool:
        """Pick up both forks; on failure put back whatever is held."""
        philosopher.left_fork.acquire()
        philosopher.holds_left = True
        if not self.table.print_status(philosopher.id, "has taken a fork", C_FORK):
            self.drop_forks(philosopher)
            return False
        philosopher.right_fork.acquire()
        philosopher.holds_right = True
        if not self.table.print_status(philosopher.id, "has taken a fork", C_FORK):
            self.drop_forks(philosopher)
            return False
        return True

    def drop_forks(self, philosopher: Philosopher) -> None:
        """Put back every fork the philosopher holds."""
        if philosopher.holds_left:
            philosopher.holds_left = False
            philosopher.left_fork.release()
        if philosopher.holds_right:
            philosopher.holds_right = False
            philosopher.right_fork.release()

    def eat(self, philosopher: Philosopher) -> bool:
        """Take the forks, eat, then put them back; False if the meal is over."""
        if not self.take_forks(philosopher):
            return False
        if not self.table.print_status(philosopher.id, "is eating", C_EAT):
            self.drop_forks(philosopher)
            return False
        philosopher.last_meal = self.table.clock()
        _pause(self.table.settings.time_to_eat)
        self.drop_forks(philosopher)
        philosopher.nb_eats += 1
        philosopher.status = Status.SLEEPING
        return True

    def sleep(self, philosopher: Philosopher) -> bool:
        """Sleep for time_to_sleep; False if the meal is over."""
        if not self.table.print_status(philosopher.id, "is sleeping", C_SLEEP):
            return False
        _pause(self.table.settings.time_to_sleep)
        philosopher.status = Status.THINKING
        return True

    def think(self, philosopher: Philosopher) -> bool:
        """Think briefly before trying to eat again; False if the meal is over."""
        if not self.table.print_status(philosopher.id, "is thinking", C_THINK):
            return False
        philosopher.status = Status.EATING
        _pause(self.table.settings.time_to_eat / 4)
        return True

    def live(self, philosopher: Philosopher) -> bool:
        """Run one eat/sleep/think cycle; False once the philosopher must stop."""
        if self.table.check_dead(philosopher):
            return False
        if philosopher.status is Status.EATING and not self.eat(philosopher):
            return False
        if philosopher.status is Status.SLEEPING and not self.sleep(philosopher):
            return False
        if philosopher.status is Status.THINKING and not self.think(philosopher):
            return False
        return True

    def _has_finished(self, philosopher: Philosopher) -> bool:
        meals = self.table.settings.nb_meals
        return meals > 0 and philosopher.nb_eats >= meals

    def routine(self, philosopher: Philosopher) -> None:
        """Thread body: live until someone dies or the meal count is reached."""
        while not self.table.check_dead(philosopher):
            if self._has_finished(philosopher):
                with self.table.finished_lock:
                    self.table.nb_philo_finished += 1
                break
            if not self.live(philosopher):
                break
        self.drop_forks(philosopher)

    def dine_alone(self) -> None:
        """A single philosopher has only one fork and starves."""
        table = self.table
        table.start_meal = table.clock()
        table.print_status(0, "has taken a fork", C_EAT)
        with table.dead_lock:
            table.philo_dead = True
        table.print_status(0, "died", C_DEAD)

    def run(self) -> None:
        """Start every philosopher's thread and wait for all of them."""
        table = self.table
        if table.settings.nb_philo == 1:
            self.dine_alone()
            return
        table.philo_dead = False
        table.start_meal = table.clock()
        for philosopher in table.philosophers:
            philosopher.last_meal = table.clock()
            thread = threading.Thread(
                target=self.routine,
                args=(philosopher,),
                name=f"philosopher-{philosopher.id}",
                daemon=True,
            )
            thread.start()
            self.threads.append(thread)
            with table.ready_lock:
                table.nb_philo_ready += 1
            _pause(_STAGGER_MS)
        for thread in self.threads:
            thread.join()


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_arguments(args)
    except ArgumentError as error:
        print(f"Error: {error}")
        return 1
    with Table(settings) as table:
        Simulation(table).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())