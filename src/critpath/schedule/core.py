"""Core dataclasses for the scheduling engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..graph import Activity


class ScheduleStatus(str, Enum):
    """Outcome tag of a scheduling run."""

    OK = "ok"
    CYCLE_DETECTED = "cycle_detected"


@dataclass(frozen=True)
class TopologicalSort:
    """Output of the topological sorter.

    ``order`` is partial when the graph has a cycle; ``unresolved`` then lists
    the stages that never became eligible.
    """

    order: tuple[int, ...]
    feasible: bool
    unresolved: tuple[int, ...] = ()


@dataclass(frozen=True)
class CycleDetected:
    """Structured negative outcome for a graph that contains a cycle."""

    partial_order: tuple[int, ...]
    unresolved: tuple[int, ...]

    @property
    def message(self) -> str:
        stages = ", ".join(str(stage) for stage in self.unresolved)
        return f"Project is infeasible: stages {stages} are on or behind a dependency cycle"


@dataclass(frozen=True)
class ActivityTime:
    """Earliest and latest start of one activity."""

    activity: Activity
    eat: int  # Earliest activity time: EST of the source
    lat: int  # Latest activity time: LST of the target minus the weight

    @property
    def earliest_finish(self) -> int:
        return self.eat + self.activity.weight

    @property
    def latest_finish(self) -> int:
        """LST of the target stage."""
        return self.lat + self.activity.weight

    @property
    def slack(self) -> int:
        return self.lat - self.eat

    @property
    def critical(self) -> bool:
        return self.slack == 0


@dataclass(frozen=True)
class ScheduleResult:
    """Immutable bundle of everything a scheduling run produced.

    ``est``/``lst`` are indexed by ``stage - 1``. ``eat``/``lat`` are
    parallel to ``activities`` (row-major discovery order). All of them are
    empty when the project is infeasible; check ``feasible`` first.
    """

    status: ScheduleStatus
    order: tuple[int, ...] = ()
    est: tuple[int, ...] = ()
    lst: tuple[int, ...] = ()
    activities: tuple[Activity, ...] = ()
    eat: tuple[int, ...] = ()
    lat: tuple[int, ...] = ()
    cycle: CycleDetected | None = None

    @classmethod
    def infeasible(cls, cycle: CycleDetected) -> ScheduleResult:
        return cls(status=ScheduleStatus.CYCLE_DETECTED, cycle=cycle)

    @property
    def feasible(self) -> bool:
        return self.status == ScheduleStatus.OK

    @property
    def project_duration(self) -> int:
        """Latest EST over all stages (0 when infeasible)."""
        return max(self.est, default=0)

    def stage_times(self) -> dict[int, tuple[int, int]]:
        """Map stage -> (EST, LST)."""
        return {stage: (self.est[stage - 1], self.lst[stage - 1]) for stage in self.order}

    def activity_times(self) -> tuple[ActivityTime, ...]:
        return tuple(
            ActivityTime(activity, eat, lat)
            for activity, eat, lat in zip(self.activities, self.eat, self.lat, strict=True)
        )

    def critical_activities(self) -> tuple[Activity, ...]:
        return tuple(time.activity for time in self.activity_times() if time.critical)

    def critical_stages(self) -> tuple[int, ...]:
        """Stages with no slack, ascending."""
        return tuple(
            stage
            for stage, (est, lst) in sorted(self.stage_times().items())
            if est == lst
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation."""
        data: dict[str, Any] = {
            "status": self.status.value,
            "feasible": self.feasible,
            "order": list(self.order),
            "est": list(self.est),
            "lst": list(self.lst),
            "activities": [
                {
                    "source": time.activity.source,
                    "target": time.activity.target,
                    "weight": time.activity.weight,
                    "eat": time.eat,
                    "lat": time.lat,
                    "earliest_finish": time.earliest_finish,
                    "latest_finish": time.latest_finish,
                    "slack": time.slack,
                    "critical": time.critical,
                }
                for time in self.activity_times()
            ],
            "project_duration": self.project_duration,
        }
        if self.cycle is not None:
            data["cycle"] = {
                "partial_order": list(self.cycle.partial_order),
                "unresolved": list(self.cycle.unresolved),
                "message": self.cycle.message,
            }
        return data
