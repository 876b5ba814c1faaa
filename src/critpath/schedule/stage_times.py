"""Earliest and latest stage times via forward and backward passes."""

from __future__ import annotations

from collections.abc import Sequence

from ..graph import WeightedGraph
from ..logger import debug_enabled, get_logger

logger = get_logger()


class StageTimeCalculator:
    """Evaluates EST and LST over a topological order.

    Both times have recursive definitions:

        EST(s) = 0                                  if s has no incoming activity
               = max(w + EST(p) for (p, w) in incoming(s))
        LST(s) = EST(s)                             if s has no outgoing activity
               = min(LST(t) - w for (t, w) in outgoing(s))

    Walking the order forwards (for EST) and backwards (for LST) guarantees
    every referenced value is already in the table, so each stage is
    computed exactly once.
    """

    def __init__(self, graph: WeightedGraph, order: Sequence[int]):
        """Bind the calculator to a graph and one of its topological orders.

        Raises:
            ValueError: If ``order`` is not a permutation of the graph's stages
        """
        if sorted(order) != list(graph.stages()):
            raise ValueError("Stage times need a complete topological order of every stage")
        self.graph = graph
        self.order = tuple(order)

    def earliest(self) -> tuple[int, ...]:
        """Forward pass. Returns EST indexed by ``stage - 1``."""
        est: list[int | None] = [None] * self.graph.stage_count()
        trace = debug_enabled()

        for stage in self.order:
            value = 0
            for source, weight in self.graph.incoming(stage):
                source_est = est[source - 1]
                if source_est is None:
                    raise ValueError(f"Stage {source} precedes {stage} but comes after it in order")
                value = max(value, weight + source_est)
            est[stage - 1] = value
            if trace:
                logger.debug("EST(%d) = %d", stage, value)

        return tuple(value for value in est if value is not None)

    def latest(self, est: Sequence[int]) -> tuple[int, ...]:
        """Backward pass. Returns LST indexed by ``stage - 1``.

        Args:
            est: Result of earliest(); terminal stages take their own EST
        """
        lst: list[int | None] = [None] * self.graph.stage_count()
        trace = debug_enabled()

        for stage in reversed(self.order):
            outgoing = self.graph.outgoing(stage)
            if not outgoing:
                value = est[stage - 1]
            else:
                candidates: list[int] = []
                for target, weight in outgoing:
                    target_lst = lst[target - 1]
                    if target_lst is None:
                        raise ValueError(
                            f"Stage {target} follows {stage} but comes before it in order"
                        )
                    candidates.append(target_lst - weight)
                value = min(candidates)
            lst[stage - 1] = value
            if trace:
                logger.debug("LST(%d) = %d", stage, value)

        return tuple(value for value in lst if value is not None)
