"""Activity time assembly from stage times."""

from __future__ import annotations

from collections.abc import Sequence

from ..graph import WeightedGraph
from .core import ActivityTime


def assemble_activity_times(
    graph: WeightedGraph,
    est: Sequence[int],
    lst: Sequence[int],
) -> tuple[ActivityTime, ...]:
    """Pair every activity with its earliest and latest start.

    Pure lookup: ``eat`` is the source's EST and ``lat`` is the target's
    LST less the activity weight. Output follows row-major discovery order,
    so position ``k`` always refers to ``graph.activities()[k]``.
    """
    return tuple(
        ActivityTime(
            activity=activity,
            eat=est[activity.source - 1],
            lat=lst[activity.target - 1] - activity.weight,
        )
        for activity in graph.activities()
    )
