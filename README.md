# telesched

`telesched` schedules astronomical targets across a set of telescopes.
Each target has an observation value, a visibility window and a start
cost, and moving a telescope from one target to the next has a slew
cost. A candidate schedule is a permutation of the targets: targets are
placed, in permutation order, into the first telescope queue that can
fit a 100-unit observation inside the target's window, trying the end
of the queue, then its start, then the first gap between two queued
targets. A target that fits no telescope is left unscheduled.

Schedules are optimised with NSGA-II on two objectives at once:
maximising the total observed value (reported as its negative, since
both objectives are minimised) and minimising the total cost of
starting and slewing. When the objectives are summed, telescopes are
read in order and the first empty queue ends the sum.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

The package needs nothing beyond the Python standard library
(Python 3.10 or later).

## Instance files

Instances are plain-text data files in the usual `param`/`set` layout.
The reader (`telesched.instance.read_instance`, or `parse_instance` for
text already in memory) looks for these sections in order:

- `N:=` followed by a line naming the targets, ending in `;`; the number
  of words sets the number of targets
- `M:=` followed by a line naming the telescopes, ending in `;`
- `start_cost:=`, a header line, then one labelled row per target with
  its value `l`, window opening `O`, window closing `D` and start cost,
  closed by a line starting with `;`
- `o<N>:=` (where `<N>` is the number of targets), then the labelled rows
  of the square slew-cost matrix, closed by a line starting with `;`

A missing marker, a wrong number of rows, or a row with too few values
raises `InstanceFormatError` (a `ValueError`).

## Running the optimiser

```
telesched SEED INSTANCE POPSIZE NGEN PCROSS PMUT
```

For example:

```
telesched 0.123 test_data.dat 100 100 0.5 0.5
```

- `SEED` must lie strictly between 0 and 1; it seeds the built-in
  subtractive random number generator (`telesched.rand.RandomGenerator`),
  so runs with the same arguments are reproducible.
- `POPSIZE` must be a positive multiple of 4.
- `NGEN` is the number of generations, at least 1.
- `PCROSS` and `PMUT` are the probabilities of order crossover and of
  swap mutation, each between 0 and 1.

Bad arguments or an unreadable instance print a message and exit with
status 1. On success the run writes these files to the current
directory:

| File              | Contents                                          |
|-------------------|---------------------------------------------------|
| `initial_pop.out` | the initial population                            |
| `final_pop.out`   | the final population                              |
| `best_pop.out`    | the feasible members of the first Pareto front    |
| `all_pop.out`     | the population of the first generation            |
| `params.out`      | the parameters as read by the program             |

Each population line holds the two objective values, the permutation,
the rank and the crowding distance (`CDD`). The CPU time spent on the
run is printed when it ends.

## Checking a single permutation

```
telesched-permcheck INSTANCE PERMUTATION_FILE
```

The permutation file holds one line of space-separated target indices,
exactly as many as the instance has targets; too many or too few raise
`PermutationError`. The tool decodes the permutation into telescope
queues, prints the permutation with its (negated) value and its cost,
and shows each telescope's queue with the start and end time of every
observation and the slew cost to the next target.

## Using it from Python

```python
from telesched.instance import read_instance
from telesched.evaluation import evaluate_permutation
from telesched.scheduling import decode_permutation

instance = read_instance("test_data.dat")
permutation = list(range(instance.n_targets))

queues = decode_permutation(permutation, instance)
for queue in queues:
    print(queue.format(instance))

print(evaluate_permutation(permutation, instance))
```

A full optimisation run is available through `telesched.nsga2.run`,
which takes a `Settings` object and a `ProblemInstance` and returns a
`RunResult` holding the initial and final populations, the number of
crossovers and mutations performed (`OperatorCounts`) and the CPU time;
`write_outputs` writes the result files described above. The building
blocks are importable on their own: `telesched.ranking`,
`telesched.selection`, `telesched.crowding`, `telesched.operators` and
`telesched.report`.

## What it does not do

- `all_pop.out` holds only the first generation; the populations of
  later generations are not logged.
- There is no live plotting of the population while the search runs.
- Constraint violation is kept on every individual and honoured by the
  dominance check, but the scheduling model never sets it, so every
  schedule counts as feasible.