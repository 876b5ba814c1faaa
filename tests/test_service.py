"""Tests for the end-to-end scheduling service."""

import pytest

from critpath.exceptions import InvalidInputError
from critpath.graph import Activity, WeightedGraph
from critpath.schedule import (
    CriticalPathScheduler,
    ScheduleStatus,
    SchedulerConfig,
    WorklistDiscipline,
    compute_schedule,
)
from tests.conftest import FOUR_STAGE, TAIL_CYCLE, TWO_CYCLE, random_dag


class TestComputeSchedule:
    """Test compute_schedule on known projects."""

    def test_four_stage_project(self) -> None:
        result = compute_schedule(FOUR_STAGE)

        assert result.feasible
        assert result.status == ScheduleStatus.OK
        assert result.cycle is None
        assert result.order[0] == 1
        assert result.order[-1] == 4
        assert result.est == (0, 5, 3, 9)
        assert result.lst == (0, 5, 7, 9)
        assert [(a.source, a.target, a.weight) for a in result.activities] == [
            (1, 2, 5),
            (1, 3, 3),
            (2, 4, 4),
            (3, 4, 2),
        ]
        assert result.eat == (0, 0, 5, 3)
        assert result.lat == (0, 4, 5, 7)
        assert [time.latest_finish for time in result.activity_times()] == [5, 7, 9, 9]

    def test_two_stage_cycle(self) -> None:
        result = compute_schedule(TWO_CYCLE)

        assert not result.feasible
        assert result.status == ScheduleStatus.CYCLE_DETECTED
        assert len(result.order) < 2
        assert result.est == ()
        assert result.lst == ()
        assert result.eat == ()
        assert result.lat == ()
        assert result.cycle is not None
        assert result.cycle.unresolved == (1, 2)

    def test_partial_order_kept_on_cycle(self) -> None:
        result = compute_schedule(TAIL_CYCLE)

        assert not result.feasible
        assert result.order == ()
        assert result.cycle is not None
        assert result.cycle.partial_order == (1,)
        assert "2, 3" in result.cycle.message

    def test_single_isolated_stage(self) -> None:
        result = compute_schedule([[0]])

        assert result.feasible
        assert result.order == (1,)
        assert result.est == (0,)
        assert result.lst == (0,)
        assert result.activities == ()
        assert result.eat == ()
        assert result.lat == ()
        assert result.project_duration == 0

    def test_malformed_input_raises(self) -> None:
        """Structural errors are raised, unlike cycles."""
        with pytest.raises(InvalidInputError):
            compute_schedule([[0, -2], [0, 0]])
        with pytest.raises(InvalidInputError):
            compute_schedule([[1]])

    def test_fifo_config(self) -> None:
        result = compute_schedule(FOUR_STAGE, SchedulerConfig(worklist=WorklistDiscipline.FIFO))

        assert result.order == (1, 2, 3, 4)
        assert result.est == (0, 5, 3, 9)

    def test_zero_weight_activity(self) -> None:
        graph = WeightedGraph.from_activities(
            3, [Activity(1, 2, 0), Activity(1, 3, 1), Activity(2, 3, 4)]
        )
        result = CriticalPathScheduler(graph).schedule()

        assert result.est == (0, 0, 4)
        assert result.lst == (0, 0, 4)
        assert result.eat == (0, 0, 0)
        assert result.lat == (0, 3, 0)


class TestScheduleResult:
    """Test derived views of a ScheduleResult."""

    def test_stage_times(self) -> None:
        result = compute_schedule(FOUR_STAGE)

        assert result.stage_times() == {1: (0, 0), 2: (5, 5), 3: (3, 7), 4: (9, 9)}

    def test_critical_path(self) -> None:
        result = compute_schedule(FOUR_STAGE)

        assert result.project_duration == 9
        assert result.critical_stages() == (1, 2, 4)
        assert result.critical_activities() == (Activity(1, 2, 5), Activity(2, 4, 4))

    def test_infeasible_views_are_empty(self) -> None:
        result = compute_schedule(TWO_CYCLE)

        assert result.stage_times() == {}
        assert result.activity_times() == ()
        assert result.critical_stages() == ()
        assert result.project_duration == 0

    def test_to_dict(self) -> None:
        data = compute_schedule(FOUR_STAGE).to_dict()

        assert data["status"] == "ok"
        assert data["feasible"] is True
        assert data["est"] == [0, 5, 3, 9]
        assert data["activities"][1] == {
            "source": 1,
            "target": 3,
            "weight": 3,
            "eat": 0,
            "lat": 4,
            "earliest_finish": 3,
            "latest_finish": 7,
            "slack": 4,
            "critical": False,
        }
        assert "cycle" not in data

    def test_to_dict_infeasible(self) -> None:
        data = compute_schedule(TAIL_CYCLE).to_dict()

        assert data["feasible"] is False
        assert data["status"] == "cycle_detected"
        assert data["cycle"]["partial_order"] == [1]
        assert data["cycle"]["unresolved"] == [2, 3]

    def test_result_is_immutable(self) -> None:
        result = compute_schedule(FOUR_STAGE)

        with pytest.raises(AttributeError):
            result.order = ()  # type: ignore[misc]


class TestScheduleProperties:
    """Properties every feasible schedule must satisfy."""

    @pytest.mark.parametrize("seed", range(25))
    def test_random_projects(self, seed: int) -> None:
        matrix = random_dag(seed, size=2 + seed % 12, density=0.2 + (seed % 5) / 10)
        graph = WeightedGraph(matrix)
        result = compute_schedule(matrix)

        assert result.feasible
        assert sorted(result.order) == list(graph.stages())
        position = {stage: index for index, stage in enumerate(result.order)}
        for activity in result.activities:
            assert position[activity.source] < position[activity.target]

        for stage in graph.stages():
            if not graph.incoming(stage):
                assert result.est[stage - 1] == 0
            if not graph.outgoing(stage):
                assert result.lst[stage - 1] == result.est[stage - 1]

        for activity, eat, lat in zip(result.activities, result.eat, result.lat, strict=True):
            assert eat == result.est[activity.source - 1]
            assert lat == result.lst[activity.target - 1] - activity.weight
            assert eat <= lat

    @pytest.mark.parametrize("seed", range(5))
    def test_idempotent(self, seed: int) -> None:
        matrix = random_dag(seed, size=10)

        assert compute_schedule(matrix) == compute_schedule(matrix)

    def test_cycle_never_raises(self) -> None:
        matrix = random_dag(7, size=8, density=0.5)
        # Close a cycle through the first activity
        source, target = next(
            (i, j) for i in range(8) for j in range(8) if matrix[i][j] > 0
        )
        matrix[target][source] = 1

        result = compute_schedule(matrix)

        assert not result.feasible
        assert result.cycle is not None
        assert len(result.cycle.partial_order) < 8
