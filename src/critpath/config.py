"""Configuration file loading for critpath.

A single optional YAML file (critpath_config.yaml) holds scheduler and
report settings:

    scheduler:
      worklist: fifo
    report:
      format: markdown
      critical_only: true
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict

from .schedule.config import SchedulerConfig

CONFIG_FILENAME = "critpath_config.yaml"


class ReportFormat(str, Enum):
    """Output formats for schedule reports."""

    TEXT = "text"
    MARKDOWN = "markdown"
    JSON = "json"


class ReportConfig(BaseModel):
    """Configuration for schedule reports."""

    model_config = ConfigDict(extra="forbid")

    format: ReportFormat = ReportFormat.TEXT
    show_activities: bool = True
    critical_only: bool = False  # Only list activities with zero slack


class UnifiedConfig(BaseModel):
    """Top-level configuration."""

    model_config = ConfigDict(extra="forbid")

    scheduler: SchedulerConfig = SchedulerConfig()
    report: ReportConfig = ReportConfig()


class _Context:
    """Process-wide settings chosen on the command line."""

    def __init__(self) -> None:
        self.config_path: Path | None = None


_context = _Context()


def get_config_path() -> Path | None:
    """Config path given with --config, if any."""
    return _context.config_path


def set_config_path(path: Path | None) -> None:
    _context.config_path = path


def load_unified_config(config_path: Path | str) -> UnifiedConfig:
    """Load configuration from a YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty or not a mapping
        pydantic.ValidationError: If a section has unknown or invalid keys
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open(encoding="utf-8") as f:
        data: Any = yaml.safe_load(f)

    if not data:
        raise ValueError("Empty configuration file")
    if not isinstance(data, dict):
        raise ValueError("Config must contain a mapping at the root level")

    return UnifiedConfig.model_validate(data)


def discover_config(
    project_path: Path | str | None = None,
    config_path: Path | None = None,
) -> UnifiedConfig:
    """Find and load the configuration that applies to a project file.

    Search order:
    1. Explicit config_path argument
    2. Global context (set via CLI --config)
    3. Project file directory / critpath_config.yaml
    4. Current directory / critpath_config.yaml

    Falls back to defaults when nothing is found.
    """
    candidates: list[Path] = []
    if config_path:
        candidates.append(config_path)
    ctx_config = get_config_path()
    if ctx_config:
        candidates.append(ctx_config)
    if project_path is not None:
        candidates.append(Path(project_path).parent / CONFIG_FILENAME)
    candidates.append(Path(CONFIG_FILENAME))

    for candidate in candidates:
        if candidate.exists():
            return load_unified_config(candidate)
    return UnifiedConfig()
