"""Configuration classes for the scheduling engine."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class WorklistDiscipline(str, Enum):
    """Order in which simultaneously eligible stages leave the worklist."""

    LIFO = "lifo"  # Stack, newest eligible stage first
    FIFO = "fifo"  # Queue, oldest eligible stage first


class SchedulerConfig(BaseModel):
    """Configuration for the critical path scheduler."""

    model_config = ConfigDict(extra="forbid")

    worklist: WorklistDiscipline = WorklistDiscipline.LIFO
