"""Problem instances: observable targets, telescopes and slew costs read from a data file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

_WORD = re.compile(r"\S+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class InstanceFormatError(ValueError):
    """Raised when an instance file does not have the expected layout."""


@dataclass(frozen=True)
class Target:
    """An object to observe, with its value, observation window and start cost."""

    id: int
    value: int = 0
    window_start: int = 0
    window_end: int = 0
    start_cost: int = 0


@dataclass(frozen=True)
class ProblemInstance:
    """Targets, the number of telescopes and the slew cost between each pair of targets."""

    targets: tuple[Target, ...]
    n_telescopes: int
    slew: tuple[tuple[int, ...], ...]

    @property
    def n_targets(self) -> int:
        return len(self.targets)

    def target_index(self, target_id: int) -> int:
        """Return the position of the target with the given id."""
        for position, target in enumerate(self.targets):
            if target.id == target_id:
                return position
        raise KeyError(f"target {target_id} not found")


def _atoi(token: str) -> int:
    match = _LEADING_INT.match(token)
    return int(match.group(1)) if match else 0


class _Cursor:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def seek_word(self, word: str) -> None:
        while True:
            match = _WORD.search(self._text, self._pos)
            if match is None:
                raise InstanceFormatError(f"marker {word!r} not found")
            self._pos = match.end()
            if match.group() == word:
                return

    def read_line(self) -> str | None:
        if self._pos >= len(self._text):
            return None
        newline = self._text.find("\n", self._pos)
        if newline == -1:
            line = self._text[self._pos:]
            self._pos = len(self._text)
        else:
            line = self._text[self._pos:newline]
            self._pos = newline + 1
        return line

    def rows(self, section: str):
        """Yield the value tokens of each labelled row up to a line starting with ';'."""
        while True:
            line = self.read_line()
            if line is None:
                raise InstanceFormatError(f"unterminated {section} section")
            tokens = line.split()
            if not tokens:
                continue
            if ";" in tokens[0]:
                return
            yield tokens[1:]


def _count_set(cursor: _Cursor, marker: str) -> int:
    cursor.seek_word(marker)
    line = cursor.read_line() or ""
    return len(line.split(";", 1)[0].split())


def parse_instance(text: str) -> ProblemInstance:
    """Build a problem instance from the text of a data file."""
    cursor = _Cursor(text)
    n_targets = _count_set(cursor, "N:=")
    n_telescopes = _count_set(cursor, "M:=")

    cursor.seek_word("start_cost:=")
    cursor.read_line()
    targets: list[Target] = []
    for values in cursor.rows("target parameter"):
        if len(targets) >= n_targets:
            raise InstanceFormatError("more parameter rows than targets")
        if len(values) < 4:
            raise InstanceFormatError(f"parameter row {len(targets)} has fewer than 4 values")
        value, start, end, cost = (_atoi(token) for token in values[:4])
        targets.append(Target(len(targets), value, start, end, cost))
    if len(targets) != n_targets:
        raise InstanceFormatError(f"expected {n_targets} parameter rows, got {len(targets)}")
    cursor.read_line()

    cursor.seek_word(f"o{n_targets}:=")
    cursor.read_line()
    slew: list[tuple[int, ...]] = []
    for values in cursor.rows("slew cost"):
        if len(slew) >= n_targets:
            raise InstanceFormatError("more slew rows than targets")
        if len(values) != n_targets:
            raise InstanceFormatError(
                f"slew row {len(slew)} has {len(values)} values, expected {n_targets}"
            )
        slew.append(tuple(_atoi(token) for token in values))
    if len(slew) != n_targets:
        raise InstanceFormatError(f"expected {n_targets} slew rows, got {len(slew)}")

    return ProblemInstance(tuple(targets), n_telescopes, tuple(slew))


def read_instance(path: str | PathLike[str]) -> ProblemInstance:
    """Read and parse an instance file."""
    return parse_instance(Path(path).read_text())


def describe_instance(instance: ProblemInstance) -> str:
    """Return a readable listing of the instance."""
    lines = [f"Targets: {instance.n_targets}"]
    for target in instance.targets:
        lines += [
            f"Target {target.id}:",
            f"l: {target.value}",
            f"O: {target.window_start}",
            f"D: {target.window_end}",
            f"Start_cost: {target.start_cost}",
            "",
        ]
    lines.append(f"Telescopes: {instance.n_telescopes}")
    lines += [f"Telescope {index}:" for index in range(instance.n_telescopes)]
    lines.append("Slew costs:")
    lines += [" ".join(str(cost) for cost in row) for row in instance.slew]
    return "\n".join(lines) + "\n"