"""Telescope observation queues and decoding of a target permutation into them."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from itertools import pairwise

from telesched.instance import ProblemInstance, Target

OBSERVATION_TIME = 100


@dataclass
class ScheduledTarget:
    """A target placed in a telescope queue with its observation interval."""

    target: Target
    start: int
    end: int

    @property
    def id(self) -> int:
        return self.target.id

    @property
    def value(self) -> int:
        return self.target.value


class TelescopeQueue:
    """The ordered observations assigned to one telescope."""

    def __init__(self, telescope_id: int) -> None:
        self.telescope_id = telescope_id
        self._items: list[ScheduledTarget] = []

    def __iter__(self) -> Iterator[ScheduledTarget]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    @property
    def finish_time(self) -> int | None:
        """Time at which the last observation ends, or None for an empty queue."""
        return self._items[-1].end if self._items else None

    @staticmethod
    def _place(target: Target, start: int) -> ScheduledTarget:
        return ScheduledTarget(target, start, start + OBSERVATION_TIME)

    def enqueue_end(self, target: Target) -> bool:
        """Append the target after the last observation if its window allows it."""
        if not self._items:
            self._items.append(self._place(target, target.window_start))
            return True
        last = self._items[-1]
        if target.window_end - OBSERVATION_TIME < last.end:
            return False
        self._items.append(self._place(target, max(target.window_start, last.end)))
        return True

    def enqueue_start(self, target: Target) -> bool:
        """Put the target before the first observation if it ends in time."""
        if not self._items:
            self._items.append(self._place(target, target.window_start))
            return True
        first = self._items[0]
        if target.window_start + OBSERVATION_TIME > first.start:
            return False
        self._items.insert(0, self._place(target, target.window_start))
        return True

    def enqueue_middle(self, target: Target) -> bool:
        """Insert the target into the first gap between observations that fits it."""
        for position, (current, following) in enumerate(pairwise(self._items)):
            earliest = max(target.window_start, current.end)
            latest = min(following.start, target.window_end)
            if latest - earliest >= OBSERVATION_TIME:
                self._items.insert(position + 1, self._place(target, earliest))
                return True
        return False

    def format(self, instance: ProblemInstance) -> str:
        """Return a readable listing of the queue with slew costs between observations."""
        header = f"Telescope {self.telescope_id}:"
        if not self._items:
            return f"{header} (empty)"
        lines = [f"{header}\tStart cost: {self._items[0].target.start_cost}"]
        for current, following in pairwise([*self._items, None]):
            line = (
                f"Target: {current.id}\t l: {current.value}"
                f"\t Sn: {current.start}\t Cn: {current.end}"
            )
            if following is not None:
                line += f"\tCost to next: {instance.slew[current.id][following.id]}"
            lines.append(line)
        return "\n".join(lines)


def decode_permutation(
    permutation: Sequence[int], instance: ProblemInstance
) -> list[TelescopeQueue]:
    """Place targets in the permutation's order into the first telescope that accepts them."""
    if sorted(permutation) != list(range(instance.n_targets)):
        raise ValueError(
            f"expected a permutation of 0..{instance.n_targets - 1}, got {list(permutation)}"
        )
    queues = [TelescopeQueue(index) for index in range(instance.n_telescopes)]
    for index in permutation:
        target = instance.targets[index]
        for queue in queues:
            if (
                queue.enqueue_end(target)
                or queue.enqueue_start(target)
                or queue.enqueue_middle(target)
            ):
                break
    return queues