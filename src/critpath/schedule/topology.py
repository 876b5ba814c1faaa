"""Topological ordering and feasibility detection."""

from __future__ import annotations

from collections import deque

from ..graph import WeightedGraph
from ..logger import debug_enabled, get_logger
from .config import WorklistDiscipline
from .core import TopologicalSort

logger = get_logger()


class TopologicalSorter:
    """Orders stages with Kahn's algorithm and decides feasibility.

    A cycle is not an error here: the sort simply stops short, and the
    result reports ``feasible=False`` with the stages it could not place.
    """

    def __init__(
        self,
        graph: WeightedGraph,
        discipline: WorklistDiscipline = WorklistDiscipline.LIFO,
    ):
        self.graph = graph
        self.discipline = discipline

    def sort(self) -> TopologicalSort:
        """Compute a topological order of all stages.

        Returns:
            TopologicalSort whose ``feasible`` flag is ``len(order) == N``
        """
        stage_count = self.graph.stage_count()
        pred_count = {stage: len(self.graph.incoming(stage)) for stage in self.graph.stages()}
        order: list[int] = []
        emitted: set[int] = set()
        worklist: deque[int] = deque()
        trace = debug_enabled()

        # Drain, then re-scan for stages that became eligible; stop once a
        # scan adds nothing.
        while True:
            queued = set(worklist)
            for stage in self.graph.stages():
                if pred_count[stage] == 0 and stage not in emitted and stage not in queued:
                    worklist.append(stage)
            if not worklist:
                break

            while worklist:
                stage = self._take(worklist)
                order.append(stage)
                emitted.add(stage)
                if trace:
                    logger.debug("Stage %d placed at position %d", stage, len(order))

                for target, _weight in self.graph.outgoing(stage):
                    pred_count[target] -= 1
                    if pred_count[target] == 0:
                        worklist.append(target)

        feasible = len(order) == stage_count
        unresolved = tuple(stage for stage in self.graph.stages() if stage not in emitted)
        return TopologicalSort(order=tuple(order), feasible=feasible, unresolved=unresolved)

    def _take(self, worklist: deque[int]) -> int:
        if self.discipline == WorklistDiscipline.FIFO:
            return worklist.popleft()
        return worklist.pop()
