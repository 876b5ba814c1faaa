"""Pydantic schemas for YAML project files."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_validator


class ActivitySchema(BaseModel):
    """One activity in list form. Weight may be zero."""

    model_config = ConfigDict(extra="forbid")

    source: StrictInt
    target: StrictInt
    weight: StrictInt = Field(ge=0)


class ProjectSchema(BaseModel):
    """Schema for a project file: a matrix, or a stage count plus activities."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    matrix: list[list[StrictInt]] | None = None
    stages: StrictInt | None = Field(default=None, ge=1)
    activities: list[ActivitySchema] | None = None

    @model_validator(mode="after")
    def check_one_form(self) -> ProjectSchema:
        """Exactly one of the two forms must be given."""
        if self.matrix is not None:
            if self.stages is not None or self.activities is not None:
                raise ValueError("Use either 'matrix' or 'stages'/'activities', not both")
        elif self.stages is None:
            raise ValueError("Project needs a 'matrix' or a 'stages' count")
        return self
