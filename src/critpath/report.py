"""Schedule report formatting."""

from __future__ import annotations

import json

from .config import ReportConfig, ReportFormat
from .schedule.core import ActivityTime, ScheduleResult


def _feasibility_line(result: ScheduleResult) -> str:
    if result.feasible:
        return "Project is feasible."
    assert result.cycle is not None
    return result.cycle.message + "."


def _selected_activities(result: ScheduleResult, config: ReportConfig) -> list[ActivityTime]:
    times = list(result.activity_times())
    if config.critical_only:
        times = [time for time in times if time.critical]
    return times


def _order_line(result: ScheduleResult) -> str:
    return " -> ".join(str(stage) for stage in result.order)


def format_text(result: ScheduleResult, config: ReportConfig | None = None) -> str:
    """Plain text report with aligned columns."""
    config = config or ReportConfig()
    lines = [_feasibility_line(result)]

    if not result.feasible:
        assert result.cycle is not None
        if result.cycle.partial_order:
            partial = " -> ".join(str(stage) for stage in result.cycle.partial_order)
            lines.append(f"Partial order: {partial}")
        return "\n".join(lines) + "\n"

    lines.append(f"Topological order: {_order_line(result)}")
    lines.append("")
    lines.append(f"{'Stage':>6} {'EST':>6} {'LST':>6} {'Slack':>6}")
    for stage, (est, lst) in sorted(result.stage_times().items()):
        lines.append(f"{stage:>6} {est:>6} {lst:>6} {lst - est:>6}")

    if config.show_activities:
        lines.append("")
        lines.append(f"{'Activity':>10} {'Weight':>6} {'EAT':>6} {'LAT':>6} {'Slack':>6}")
        for time in _selected_activities(result, config):
            marker = " *" if time.critical else ""
            lines.append(
                f"{time.activity!s:>10} {time.activity.weight:>6} {time.eat:>6} "
                f"{time.lat:>6} {time.slack:>6}{marker}"
            )

    lines.append("")
    lines.append(f"Project duration: {result.project_duration}")
    return "\n".join(lines) + "\n"


def format_markdown(result: ScheduleResult, config: ReportConfig | None = None) -> str:
    """Markdown report with one table for stages and one for activities."""
    config = config or ReportConfig()
    lines = ["# Critical Path Schedule", "", _feasibility_line(result), ""]

    if not result.feasible:
        return "\n".join(lines)

    lines.append(f"**Topological order:** {_order_line(result)}")
    lines.append("")
    lines.append("## Stages")
    lines.append("")
    lines.append("| Stage | EST | LST | Slack |")
    lines.append("|------:|----:|----:|------:|")
    for stage, (est, lst) in sorted(result.stage_times().items()):
        lines.append(f"| {stage} | {est} | {lst} | {lst - est} |")
    lines.append("")

    if config.show_activities:
        lines.append("## Activities")
        lines.append("")
        lines.append("| Activity | Weight | EAT | LAT | Slack | Critical |")
        lines.append("|----------|-------:|----:|----:|------:|:--------:|")
        for time in _selected_activities(result, config):
            critical = "yes" if time.critical else ""
            lines.append(
                f"| {time.activity} | {time.activity.weight} | {time.eat} | {time.lat} "
                f"| {time.slack} | {critical} |"
            )
        lines.append("")

    lines.append(f"**Project duration:** {result.project_duration}")
    lines.append("")
    return "\n".join(lines)


def format_json(result: ScheduleResult, config: ReportConfig | None = None) -> str:
    """JSON document of ScheduleResult.to_dict(); ``critical_only`` filters activities."""
    data = result.to_dict()
    if config is not None and config.critical_only:
        data["activities"] = [item for item in data["activities"] if item["critical"]]
    return json.dumps(data, indent=2) + "\n"


def format_report(result: ScheduleResult, config: ReportConfig | None = None) -> str:
    """Render ``result`` in the format named by ``config``."""
    config = config or ReportConfig()
    if config.format == ReportFormat.MARKDOWN:
        return format_markdown(result, config)
    if config.format == ReportFormat.JSON:
        return format_json(result, config)
    return format_text(result, config)
