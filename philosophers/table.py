"""The dining table: philosophers, forks and the monitor that watches them."""

from __future__ import annotations

import sys
import threading
import time
from typing import TextIO

from .arguments import Settings


def now_ms() -> int:
    """Wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


class Philosopher:
    """One philosopher sitting between two forks."""

    def __init__(self, table: Table, number: int,
                 left_fork: threading.Lock, right_fork: threading.Lock) -> None:
        self.table = table
        self.number = number
        self.left_fork = left_fork
        self.right_fork = right_fork
        self.num_meals = 0
        self.last_meal_time = table.start_time
        self.meal_lock = threading.Lock()
        self.thread: threading.Thread | None = None

    def has_finished(self) -> bool:
        """True once this philosopher has eaten the required number of meals."""
        limit = self.table.settings.num_meals
        return limit > 0 and self.num_meals >= limit

    def eat(self) -> None:
        """Take both forks, eat, and put the forks down again."""
        if self.number % 2 == 0:
            first, second = self.left_fork, self.right_fork
        else:
            first, second = self.right_fork, self.left_fork
        with first, second:
            if self.table.died:
                return
            with self.meal_lock:
                self.last_meal_time = now_ms()
                self.num_meals += 1
            self.table.announce("has taken a fork", self.number)
            self.table.announce("has taken a fork", self.number)
            self.table.announce("is eating", self.number)
            self.table.sleep(self.table.settings.time_to_eat)

    def run(self) -> None:
        """Eat, sleep and think until the simulation stops."""
        table = self.table
        settings = table.settings
        if settings.num_philos == 1:
            table.announce("is thinking", self.number)
            table.sleep(settings.time_to_die + 10)
            return
        while True:
            self.eat()
            if self.has_finished():
                return
            table.announce("is sleeping", self.number)
            table.sleep(settings.time_to_sleep)
            table.announce("is thinking", self.number)
            if table.died:
                return
            time.sleep(0.0005)


class Table:
    """Shared state of one simulation run."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        if settings.num_philos == 0:
            raise ValueError("at least one philosopher is required")
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.start_time = now_ms()
        self._stop = threading.Event()
        self._print_lock = threading.Lock()
        count = settings.num_philos
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [
            Philosopher(self, seat + 1, self.forks[seat], self.forks[(seat + 1) % count])
            for seat in range(count)
        ]

    @property
    def died(self) -> bool:
        """True once the simulation has been stopped."""
        return self._stop.is_set()

    def announce(self, message: str, phil_id: int) -> None:
        """Print a timestamped status line unless the simulation has stopped."""
        with self._print_lock:
            if self.died:
                return
            self.out.write(f"{now_ms() - self.start_time} {phil_id} {message}\n")
            self.out.flush()

    def sleep(self, duration_ms: int) -> None:
        """Wait *duration_ms* milliseconds, returning early if the run stops."""
        deadline = now_ms() + duration_ms
        while not self.died:
            remaining = deadline - now_ms()
            if remaining <= 0:
                return
            self._stop.wait(min(remaining, 1) / 1000)

    def check_philosopher(self, philosopher: Philosopher) -> bool:
        """Report and stop the run if *philosopher* has starved; return True then."""
        with philosopher.meal_lock:
            starving = now_ms() - philosopher.last_meal_time > self.settings.time_to_die
            if starving and not philosopher.has_finished():
                self.announce("died", philosopher.number)
                self._stop.set()
                return True
        return False

    def monitor(self) -> None:
        """Watch the philosophers until one dies or all have eaten enough."""
        while not self.died:
            done = True
            for philosopher in self.philosophers:
                if self.check_philosopher(philosopher):
                    return
                if not philosopher.has_finished():
                    done = False
            if self.settings.num_meals > 0 and done:
                self._stop.set()
                return
            time.sleep(0.001)

    def run(self) -> None:
        """Run the whole simulation and wait for every thread to finish."""
        watcher = threading.Thread(target=self.monitor, name="monitor")
        watcher.start()
        for philosopher in self.philosophers:
            philosopher.thread = threading.Thread(
                target=philosopher.run, name=f"philosopher-{philosopher.number}"
            )
            philosopher.thread.start()
        watcher.join()
        for philosopher in self.philosophers:
            if philosopher.thread is not None:
                philosopher.thread.join()