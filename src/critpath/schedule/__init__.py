"""Scheduling engine - critical path analysis of a stage/activity graph.

Main entry points:
- compute_schedule: Pure function from weight matrix to ScheduleResult
- CriticalPathScheduler: Same pipeline over an already-built WeightedGraph

Building blocks:
- TopologicalSorter: Kahn's algorithm, the only feasibility check
- StageTimeCalculator: EST forward pass, LST backward pass
- assemble_activity_times: EAT/LAT lookup from stage times
"""

from .activity_times import assemble_activity_times
from .config import SchedulerConfig, WorklistDiscipline
from .core import (
    ActivityTime,
    CycleDetected,
    ScheduleResult,
    ScheduleStatus,
    TopologicalSort,
)
from .service import CriticalPathScheduler, compute_schedule
from .stage_times import StageTimeCalculator
from .topology import TopologicalSorter

__all__ = [
    # Results
    "ActivityTime",
    "CycleDetected",
    "ScheduleResult",
    "ScheduleStatus",
    "TopologicalSort",
    # Configuration
    "SchedulerConfig",
    "WorklistDiscipline",
    # Pipeline steps
    "TopologicalSorter",
    "StageTimeCalculator",
    "assemble_activity_times",
    # Entry points
    "CriticalPathScheduler",
    "compute_schedule",
]
