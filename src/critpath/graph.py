"""Weighted activity graph for critpath.

Stages are the integers 1..N. An activity from stage ``i`` to stage ``j``
exists when ``matrix[i-1][j-1] > 0``; its weight is that entry.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .exceptions import InvalidInputError


@dataclass(frozen=True)
class Activity:
    """A weighted edge between two stages."""

    source: int
    target: int
    weight: int

    def __str__(self) -> str:
        return f"{self.source}->{self.target}"


def _check_weight(value: object, where: str) -> int:
    # bool is an int subclass but never a meaningful weight
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{where}: weight must be an integer, got {value!r}")
    if value < 0:
        raise InvalidInputError(f"{where}: negative weight {value}")
    return value


class WeightedGraph:
    """Immutable adjacency view over a square weight matrix.

    Successor and predecessor lists are built once at construction, so
    ``outgoing``/``incoming`` are lookups rather than matrix scans.
    """

    def __init__(self, matrix: Sequence[Sequence[int]]):
        """Validate ``matrix`` and index its activities.

        Raises:
            InvalidInputError: If the matrix is empty or not square, or holds
                a non-integer, negative or self-loop entry
        """
        size = len(matrix)
        if size == 0:
            raise InvalidInputError("Weight matrix must have at least one stage")

        activities: list[Activity] = []
        for i, row in enumerate(matrix):
            if len(row) != size:
                raise InvalidInputError(
                    f"Weight matrix must be square: row {i + 1} has {len(row)} entries, "
                    f"expected {size}"
                )
            for j, value in enumerate(row):
                weight = _check_weight(value, f"entry ({i + 1}, {j + 1})")
                if weight == 0:
                    continue
                if i == j:
                    raise InvalidInputError(f"Self-loop on stage {i + 1}")
                activities.append(Activity(i + 1, j + 1, weight))

        self._init_index(size, activities)

    @classmethod
    def from_activities(cls, stage_count: int, activities: Iterable[Activity]) -> WeightedGraph:
        """Build a graph from an explicit activity list.

        Unlike the matrix form, this accepts zero-weight activities: they
        constrain the ordering without adding time.

        Raises:
            InvalidInputError: On unknown stages, self-loops, negative weights
                or a repeated (source, target) pair
        """
        if isinstance(stage_count, bool) or not isinstance(stage_count, int) or stage_count < 1:
            raise InvalidInputError(f"Stage count must be a positive integer, got {stage_count!r}")

        seen: set[tuple[int, int]] = set()
        checked: list[Activity] = []
        for activity in activities:
            for stage in (activity.source, activity.target):
                if isinstance(stage, bool) or not isinstance(stage, int):
                    raise InvalidInputError(f"Activity {activity}: stage must be an integer")
                if not 1 <= stage <= stage_count:
                    raise InvalidInputError(
                        f"Activity {activity}: stage {stage} is outside 1..{stage_count}"
                    )
            if activity.source == activity.target:
                raise InvalidInputError(f"Self-loop on stage {activity.source}")
            _check_weight(activity.weight, f"activity {activity}")
            key = (activity.source, activity.target)
            if key in seen:
                raise InvalidInputError(f"Duplicate activity {activity}")
            seen.add(key)
            checked.append(activity)

        graph = cls.__new__(cls)
        # Row-major discovery order, same as a matrix scan
        graph._init_index(stage_count, sorted(checked, key=lambda a: (a.source, a.target)))
        return graph

    def _init_index(self, size: int, activities: list[Activity]) -> None:
        self._size = size
        self._activities = tuple(activities)
        self._weights = {(a.source, a.target): a.weight for a in activities}

        outgoing: list[list[tuple[int, int]]] = [[] for _ in range(size)]
        incoming: list[list[tuple[int, int]]] = [[] for _ in range(size)]
        for activity in activities:
            outgoing[activity.source - 1].append((activity.target, activity.weight))
            incoming[activity.target - 1].append((activity.source, activity.weight))
        self._outgoing = tuple(tuple(edges) for edges in outgoing)
        self._incoming = tuple(tuple(sorted(edges)) for edges in incoming)

    def stage_count(self) -> int:
        """Number of stages N."""
        return self._size

    def stages(self) -> range:
        """All stages, 1..N."""
        return range(1, self._size + 1)

    def outgoing(self, stage: int) -> tuple[tuple[int, int], ...]:
        """(target, weight) for every activity leaving ``stage``."""
        return self._outgoing[self._index(stage)]

    def incoming(self, stage: int) -> tuple[tuple[int, int], ...]:
        """(source, weight) for every activity entering ``stage``."""
        return self._incoming[self._index(stage)]

    def weight(self, source: int, target: int) -> int | None:
        """Weight of the activity source->target, or None if there is none."""
        return self._weights.get((source, target))

    def activities(self) -> tuple[Activity, ...]:
        """All activities in row-major discovery order."""
        return self._activities

    def to_matrix(self) -> list[list[int]]:
        """Weight matrix view (zero-weight activities are indistinguishable from none)."""
        matrix = [[0] * self._size for _ in range(self._size)]
        for activity in self._activities:
            matrix[activity.source - 1][activity.target - 1] = activity.weight
        return matrix

    def _index(self, stage: int) -> int:
        if not 1 <= stage <= self._size:
            raise KeyError(f"Unknown stage {stage}, expected 1..{self._size}")
        return stage - 1

    def __repr__(self) -> str:
        return f"WeightedGraph(stages={self._size}, activities={len(self._activities)})"
