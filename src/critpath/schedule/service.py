"""Critical path scheduling service.

Runs the pipeline graph -> topological sort -> stage times -> activity
times -> result, stopping after the sort when the graph has a cycle.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..graph import WeightedGraph
from ..logger import checks_enabled, get_logger
from .activity_times import assemble_activity_times
from .config import SchedulerConfig
from .core import CycleDetected, ScheduleResult, ScheduleStatus
from .stage_times import StageTimeCalculator
from .topology import TopologicalSorter

logger = get_logger()


class CriticalPathScheduler:
    """Computes the critical path schedule of one project graph."""

    def __init__(self, graph: WeightedGraph, config: SchedulerConfig | None = None):
        """Initialize the scheduler.

        Args:
            graph: Validated project graph
            config: Optional scheduler configuration (worklist discipline)
        """
        self.graph = graph
        self.config = config or SchedulerConfig()

    def schedule(self) -> ScheduleResult:
        """Run the full computation.

        Returns:
            A feasible ScheduleResult, or one tagged CYCLE_DETECTED whose
            ``cycle`` describes where the sort got stuck. Cycles never raise.
        """
        topo = TopologicalSorter(self.graph, self.config.worklist).sort()

        if not topo.feasible:
            cycle = CycleDetected(partial_order=topo.order, unresolved=topo.unresolved)
            logger.changes("Project is infeasible.")
            if checks_enabled():
                logger.checks(
                    "Placed %d of %d stages; unresolved: %s",
                    len(topo.order),
                    self.graph.stage_count(),
                    ", ".join(str(stage) for stage in topo.unresolved),
                )
            return ScheduleResult.infeasible(cycle)

        logger.changes("Project is feasible.")
        calculator = StageTimeCalculator(self.graph, topo.order)

        logger.checks("Determining early stage times...")
        est = calculator.earliest()
        logger.checks("Determining late stage times...")
        lst = calculator.latest(est)

        logger.checks("Building list of costs...")
        activities = self.graph.activities()
        logger.checks("Determining early/late activity times...")
        times = assemble_activity_times(self.graph, est, lst)

        result = ScheduleResult(
            status=ScheduleStatus.OK,
            order=topo.order,
            est=est,
            lst=lst,
            activities=activities,
            eat=tuple(time.eat for time in times),
            lat=tuple(time.lat for time in times),
        )
        logger.changes("Project duration: %d", result.project_duration)
        return result


def compute_schedule(
    matrix: Sequence[Sequence[int]],
    config: SchedulerConfig | None = None,
) -> ScheduleResult:
    """Compute the schedule of the project described by a weight matrix.

    Raises:
        InvalidInputError: If the matrix is malformed
    """
    return CriticalPathScheduler(WeightedGraph(matrix), config).schedule()
