"""Graphviz DOT export of a scheduled project."""

from __future__ import annotations

from .graph import Activity, WeightedGraph
from .schedule.core import ScheduleResult

CRITICAL_COLOR = "red"
UNRESOLVED_FILL = "mistyrose"


class DotGenerator:
    """Generate a DOT digraph annotated with schedule times.

    Feasible projects get EST/LST on every stage and the critical path
    drawn bold; infeasible ones get their unresolved stages filled.
    """

    def __init__(self, graph: WeightedGraph, result: ScheduleResult):
        self.graph = graph
        self.result = result

    def generate(self) -> str:
        lines = ["digraph Schedule {"]
        lines.append("  rankdir=LR;")
        lines.append("  node [shape=circle];")
        lines.append("")

        critical_stages = set(self.result.critical_stages())
        unresolved = set(self.result.cycle.unresolved) if self.result.cycle else set()
        for stage in self.graph.stages():
            lines.append(f"  {self._format_node(stage, critical_stages, unresolved)}")
        lines.append("")

        lines.append("  // Activities")
        critical_activities = set(self.result.critical_activities())
        for activity in self.graph.activities():
            lines.append(f"  {self._format_edge(activity, activity in critical_activities)}")

        lines.append("}")
        return "\n".join(lines)

    def _format_node(self, stage: int, critical: set[int], unresolved: set[int]) -> str:
        attrs: list[str] = []
        if self.result.feasible:
            est, lst = self.result.stage_times()[stage]
            attrs.append(f'label="{stage}\\n{est} / {lst}"')
        else:
            attrs.append(f'label="{stage}"')

        if stage in critical:
            attrs.append(f'color="{CRITICAL_COLOR}"')
            attrs.append("penwidth=2")
        if stage in unresolved:
            attrs.append("style=filled")
            attrs.append(f'fillcolor="{UNRESOLVED_FILL}"')

        return f"s{stage} [{', '.join(attrs)}];"

    def _format_edge(self, activity: Activity, critical: bool) -> str:
        attrs = [f'label="{activity.weight}"']
        if critical:
            attrs.append(f'color="{CRITICAL_COLOR}"')
            attrs.append("penwidth=2")
        return f"s{activity.source} -> s{activity.target} [{', '.join(attrs)}];"
