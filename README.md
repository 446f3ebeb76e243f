# philosophers

A console simulation of the dining philosophers problem. Each philosopher
runs in its own thread and sits at a round table with one fork on each side.
A philosopher needs both forks to eat. After eating they sleep, then think,
then try to eat again. The simulation ends as soon as one philosopher has
gone longer than the time to die since their last meal. When a number of
meals is given, each philosopher stops once they have eaten that many times.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_meals]
```

The same entry point can be run as `python -m philosophers.simulation`.

All times are in milliseconds. Every argument must be a positive whole
number made only of digits (no sign, no spaces). There can be at most 200
philosophers.

Example:

```
philo 5 800 200 200
```

Each event is written to standard output on its own line: the milliseconds
since the start, the philosopher's number (counting from 1) and the event,
wrapped in ANSI colour codes that depend on the event:

```
 0 1 has taken a fork
 0 1 has taken a fork
 0 1 is eating
 200 1 is sleeping
 400 1 is thinking
 ...
```

Once a philosopher has died, the `died` line and any line printed after it
are shown in red, and their timestamp has the time to die added to it.

With a single philosopher there is only one fork: the program prints
`has taken a fork` and `died` for philosopher number 0, then stops.

Invalid input prints a line beginning with `Error:` and exits with status 1.
This happens when there are fewer than four or more than five arguments,
when an argument is zero, when an argument is not a number or exceeds
2147483647, and when there are more than 200 philosophers.

## Library use

```python
from philosophers.parsing import parse_arguments
from philosophers.table import Table
from philosophers.simulation import Simulation

settings = parse_arguments(["4", "410", "200", "200"])
with Table(settings) as table:
    Simulation(table).run()
```

- `philosophers.parsing.parse_arguments` returns a frozen `Settings`
  (`nb_philo`, `time_to_die`, `time_to_eat`, `time_to_sleep`, `nb_meals`,
  the last being 0 when not given) and raises `ArgumentError`, a
  `ValueError`, on invalid input. `philo_atoi` returns -1 for text that is
  not a plain decimal number or that overflows a 32-bit signed integer.
- `philosophers.table.Table` takes the settings and, optionally, a text
  stream to write to (standard output by default) and a clock returning
  milliseconds. Closing it, or leaving its `with` block, releases any fork a
  philosopher still holds. `fork_indices` gives the order in which a seat
  picks up its forks: even seats take their own fork first, odd seats their
  neighbour's.
- `philosophers.simulation.Simulation.run` starts one thread per
  philosopher and waits for all of them to finish.

## Development

```
pip install -e ".[test]"
pytest
```