"""Multi-objective genetic search for telescope observation schedules."""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from telesched.individual import (
    N_OBJECTIVES,
    Individual,
    evaluate_population,
    initialize_population,
    merge,
)
from telesched.instance import InstanceFormatError, ProblemInstance, read_instance
from telesched.operators import OperatorCounts, mutate_population, selection
from telesched.rand import RandomGenerator
from telesched.ranking import assign_rank_and_crowding_distance
from telesched.report import format_feasible, format_population
from telesched.selection import fill_nondominated_sort

USAGE = (
    "Usage: nsga2r seed instance popsize ngen pcross pmut\n"
    "Example: nsga2r 0.123 test_data.dat 100 100 0.5 0.5"
)


class SettingsError(ValueError):
    """Raised when the run parameters are missing or out of range."""


@dataclass
class Settings:
    """Parameters of one search run."""

    seed: float
    popsize: int
    ngen: int
    pcross: float
    pmut: float
    instance_path: str = ""

    def validate(self) -> None:
        """Raise SettingsError if any parameter is out of range."""
        if not 0.0 < self.seed < 1.0:
            raise SettingsError("seed value must be in (0,1)")
        if self.popsize < 4 or self.popsize % 4:
            raise SettingsError(
                f"wrong population size {self.popsize}: it must be a positive multiple of 4"
            )
        if self.ngen < 1:
            raise SettingsError(f"wrong number of generations {self.ngen}")
        if not 0.0 <= self.pcross <= 1.0:
            raise SettingsError(f"probability of crossover {self.pcross:e} is out of bounds")
        if not 0.0 <= self.pmut <= 1.0:
            raise SettingsError(f"probability of mutation {self.pmut:e} is out of bounds")

    def describe(self) -> str:
        """Return the parameter listing written to the params file."""
        return (
            f"\n Population size = {self.popsize}"
            f"\n Number of generations = {self.ngen}"
            f"\n Number of objective functions = {N_OBJECTIVES}"
            f"\n Probability of crossover = {self.pcross:e}"
            f"\n Probability of mutation = {self.pmut:e}"
            f"\n Seed for random number generator = {self.seed:e}"
        )


@dataclass
class RunResult:
    """Populations and statistics of a finished run."""

    initial_population: list[Individual]
    final_population: list[Individual]
    counts: OperatorCounts = field(default_factory=OperatorCounts)
    cpu_time: float = 0.0


def run(settings: Settings, instance: ProblemInstance) -> RunResult:
    """Evolve a population of target permutations for the configured generations."""
    settings.validate()
    started = time.process_time()
    rng = RandomGenerator(settings.seed)
    counts = OperatorCounts()

    parents = initialize_population(rng, settings.popsize, instance.n_targets)
    evaluate_population(parents, instance)
    assign_rank_and_crowding_distance(parents, rng)
    initial = [individual.copy() for individual in parents]

    for _ in range(2, settings.ngen + 1):
        children = selection(parents, rng, settings.pcross, counts)
        mutate_population(children, rng, settings.pmut, counts)
        evaluate_population(children, instance)
        mixed = merge(parents, children)
        parents = fill_nondominated_sort(mixed, settings.popsize, rng)

    return RunResult(initial, parents, counts, time.process_time() - started)


def write_outputs(
    result: RunResult, settings: Settings, directory: str | PathLike[str] = "."
) -> list[Path]:
    """Write the population and parameter files into ``directory``; return their paths."""
    base = Path(directory)
    contents = {
        "initial_pop.out": "# This file contains the data of initial population\n"
        + format_population(result.initial_population),
        "final_pop.out": "# This file contains the data of final population\n"
        + format_population(result.final_population),
        "best_pop.out": "# This file contains the data of final feasible population (if found)\n"
        + format_feasible(result.final_population),
        "all_pop.out": "# This file contains the data of all generations\n# gen = 1\n"
        + format_population(result.initial_population),
        "params.out": "# This file contains information about inputs as read by the program\n"
        + settings.describe(),
    }
    written = []
    for name, text in contents.items():
        path = base / name
        path.write_text(text)
        written.append(path)
    return written


def parse_args(argv: Sequence[str]) -> Settings:
    """Build settings from ``seed instance popsize ngen pcross pmut``."""
    if len(argv) < 6:
        raise SettingsError(USAGE)
    try:
        return Settings(
            seed=float(argv[0]),
            instance_path=argv[1],
            popsize=int(argv[2]),
            ngen=int(argv[3]),
            pcross=float(argv[4]),
            pmut=float(argv[5]),
        )
    except ValueError as error:
        raise SettingsError(f"invalid argument: {error}") from error


def main(argv: Sequence[str] | None = None) -> int:
    """Run the search from the command line and write the report files."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        settings = parse_args(argv)
        settings.validate()
    except SettingsError as error:
        print(error)
        return 1
    try:
        instance = read_instance(settings.instance_path)
    except (OSError, InstanceFormatError) as error:
        print(f"Cannot read instance {settings.instance_path}: {error}")
        return 1
    result = run(settings, instance)
    print(f"\n Generations finished cpu time: \n{result.cpu_time:f}")
    write_outputs(result, settings)
    return 0