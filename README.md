# philosophers

A simulation of the dining philosophers problem. Each philosopher runs on its
own thread. It picks up the two forks next to it, eats, sleeps and thinks. A
monitor thread watches for starvation. Every state change is printed as a line
of the form:

```
<milliseconds since start> <philosopher number> <action>
```

The actions are `has taken a fork`, `is eating`, `is sleeping`, `is thinking`
and `died`. After the run has stopped, no further lines are printed.

## Installation

```
pip install .
```

## Usage

```
philosophers number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

The same program can be started with `python -m philosophers.cli`.

All times are in milliseconds. Each argument must be a whole number from 0 up
to 2147483647. Leading whitespace and a single `+` or `-` sign are accepted,
but nothing may follow the digits.

When the optional meal count is given and is greater than 0, the simulation
ends once every philosopher has eaten that many times. Without it, or with a
count of 0, the simulation runs until a philosopher dies. A philosopher dies
when more than `time_to_die` milliseconds pass since the start of their last
meal, or since the start of the run if they have not yet eaten.

Examples:

```
philosophers 5 800 200 200        # runs until a philosopher dies
philosophers 5 800 200 200 7      # stops once everyone has eaten 7 times
philosophers 1 800 200 200        # the lone philosopher has one fork and dies
```

Exit status:

- With the wrong number of arguments, the program prints
  `Error: Wrong number of arguments.` and exits with status 1.
- With an argument that is not a valid number, it prints
  `Error: Invalid arguments.` and exits with status 1.
- With 0 philosophers, it prints nothing and exits with status 1.
- Otherwise it exits with status 0 once every thread has finished.

## Library use

```python
import io
from philosophers.arguments import parse_arguments
from philosophers.table import Table

settings = parse_arguments(["4", "410", "200", "200", "3"])
out = io.StringIO()
Table(settings, out).run()
print(out.getvalue())
```

- `philosophers.arguments.parse_arguments(args)` takes the arguments without
  the program name. It returns a frozen `Settings` dataclass with the fields
  `num_philos`, `time_to_die`, `time_to_eat`, `time_to_sleep` and `num_meals`.
  When no meal count is given, `num_meals` is -1. It raises `ArgumentError`, a
  subclass of `ValueError`, when the input is invalid.
- `philosophers.arguments.is_valid_number(text)` checks a single argument.
- `philosophers.table.Table(settings, out=None)` writes to `out`, or to
  standard output when `out` is not given. It raises `ValueError` when
  `settings.num_philos` is 0. `Table.run()` starts the monitor and the
  philosopher threads and waits for all of them to finish.

## Running the tests

```
pip install .[test]
pytest
```