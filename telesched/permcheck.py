"""Decode one permutation read from a file and show the resulting telescope queues."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from os import PathLike
from pathlib import Path

from telesched.evaluation import evaluate_queues
from telesched.instance import InstanceFormatError, read_instance
from telesched.scheduling import decode_permutation

USAGE = "Usage: permcheck instance_file permutation_file\nExample: permcheck test_data.dat perm.txt"


class PermutationError(ValueError):
    """Raised when a permutation file does not hold one number per target."""


def parse_permutation(text: str, size: int) -> list[int]:
    """Return the ``size`` integers on the first line of ``text``."""
    first_line = text.splitlines()[0] if text else ""
    tokens = first_line.split()
    if len(tokens) > size:
        raise PermutationError("permutation has more numbers than observable objects")
    if len(tokens) != size:
        raise PermutationError("not enough objects in permutation")
    try:
        return [int(token) for token in tokens]
    except ValueError as error:
        raise PermutationError(f"invalid number in permutation: {error}") from error


def read_permutation(path: str | PathLike[str], size: int) -> list[int]:
    """Read a permutation of ``size`` targets from a file."""
    return parse_permutation(Path(path).read_text(), size)


def main(argv: Sequence[str] | None = None) -> int:
    """Decode the permutation of a file against an instance and print the queues."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) < 2:
        print(USAGE)
        return 1
    try:
        instance = read_instance(argv[0])
        permutation = read_permutation(argv[1], instance.n_targets)
        queues = decode_permutation(permutation, instance)
    except (OSError, ValueError) as error:
        kind = "instance" if isinstance(error, InstanceFormatError) else "input"
        print(f"Cannot process {kind}: {error}")
        return 1
    value, cost = evaluate_queues(queues, instance)
    print("Permutation: " + " ".join(str(index) for index in permutation))
    print(f"\t value: {value:f}\t cost: {cost:f}")
    for queue in queues:
        print()
        print(queue.format(instance))
    return 0