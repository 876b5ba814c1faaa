"""Project file parsing for critpath.

Two formats are accepted:

- YAML (``.yaml``/``.yml``), validated by ProjectSchema
- plain text, one matrix row per line, integers separated by whitespace
  and/or commas; blank lines and ``#`` comments are skipped
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ParseError
from .graph import Activity, WeightedGraph
from .schemas import ProjectSchema

YAML_SUFFIXES = {".yaml", ".yml"}

_SEPARATORS = re.compile(r"[\s,]+")


class ProjectParser:
    """Reads project files into WeightedGraph instances.

    Syntax problems raise ParseError. A file that parses but describes a
    bad graph (non-square, self-loop) raises InvalidInputError from the
    graph model.
    """

    def parse_file(self, file_path: Path | str) -> WeightedGraph:
        """Parse a project file, choosing the format by extension."""
        path = Path(file_path)
        if not path.exists():
            raise ParseError(f"File not found: {file_path}")

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ParseError(f"Cannot read {file_path}: {e}") from e

        if path.suffix.lower() in YAML_SUFFIXES:
            return self.parse_yaml(text)
        return self.parse_text(text)

    def parse_yaml(self, text: str) -> WeightedGraph:
        try:
            data: Any = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ParseError(f"Failed to parse YAML: {e}") from e

        if not isinstance(data, dict):
            raise ParseError("YAML must contain a dictionary at the root level")

        try:
            schema = ProjectSchema.model_validate(data)
        except PydanticValidationError as e:
            raise ParseError(f"Invalid project file: {e}") from e

        return self._build_graph(schema)

    def parse_text(self, text: str) -> WeightedGraph:
        matrix: list[list[int]] = []
        for line_no, raw_line in enumerate(text.splitlines(), start=1):
            line = raw_line.split("#", 1)[0].strip()
            if not line:
                continue
            tokens = [token for token in _SEPARATORS.split(line) if token]
            try:
                matrix.append([int(token) for token in tokens])
            except ValueError as e:
                raise ParseError(f"Line {line_no}: expected integers, got {line!r}") from e

        if not matrix:
            raise ParseError("Project file contains no matrix rows")
        return WeightedGraph(matrix)

    def _build_graph(self, schema: ProjectSchema) -> WeightedGraph:
        if schema.matrix is not None:
            return WeightedGraph(schema.matrix)

        assert schema.stages is not None
        activities = [
            Activity(source=item.source, target=item.target, weight=item.weight)
            for item in schema.activities or []
        ]
        return WeightedGraph.from_activities(schema.stages, activities)
