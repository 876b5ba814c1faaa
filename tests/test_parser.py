"""Tests for project file parsing."""

from pathlib import Path

import pytest

from critpath.exceptions import InvalidInputError, ParseError
from critpath.graph import Activity
from critpath.parser import ProjectParser
from tests.conftest import FOUR_STAGE


class TestYamlProjects:
    """Test YAML project files."""

    def test_matrix_form(self, tmp_path: Path) -> None:
        path = tmp_path / "project.yaml"
        path.write_text(
            """
name: Four stages
matrix:
  - [0, 5, 3, 0]
  - [0, 0, 0, 4]
  - [0, 0, 0, 2]
  - [0, 0, 0, 0]
"""
        )
        graph = ProjectParser().parse_file(path)

        assert graph.to_matrix() == FOUR_STAGE

    def test_activity_form(self, tmp_path: Path) -> None:
        path = tmp_path / "project.yml"
        path.write_text(
            """
stages: 3
activities:
  - {source: 2, target: 3, weight: 0}
  - {source: 1, target: 2, weight: 6}
"""
        )
        graph = ProjectParser().parse_file(path)

        assert graph.stage_count() == 3
        assert graph.activities() == (Activity(1, 2, 6), Activity(2, 3, 0))

    def test_stages_without_activities(self) -> None:
        graph = ProjectParser().parse_yaml("stages: 2\n")

        assert graph.stage_count() == 2
        assert graph.activities() == ()

    def test_both_forms_rejected(self) -> None:
        with pytest.raises(ParseError, match="either"):
            ProjectParser().parse_yaml("stages: 1\nmatrix: [[0]]\n")

    def test_neither_form_rejected(self) -> None:
        with pytest.raises(ParseError, match="matrix"):
            ProjectParser().parse_yaml("name: nothing\n")

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(ParseError, match="Invalid project file"):
            ProjectParser().parse_yaml("matrix: [[0]]\ncolour: blue\n")

    def test_negative_activity_weight_rejected(self) -> None:
        with pytest.raises(ParseError):
            ProjectParser().parse_yaml(
                "stages: 2\nactivities:\n  - {source: 1, target: 2, weight: -1}\n"
            )

    def test_string_weight_rejected(self) -> None:
        with pytest.raises(ParseError):
            ProjectParser().parse_yaml("matrix: [[0, '3'], [0, 0]]\n")

    def test_root_must_be_mapping(self) -> None:
        with pytest.raises(ParseError, match="dictionary"):
            ProjectParser().parse_yaml("- [0]\n")

    def test_yaml_syntax_error(self) -> None:
        with pytest.raises(ParseError, match="Failed to parse YAML"):
            ProjectParser().parse_yaml("matrix: [[0, 1\n")

    def test_structural_errors_come_from_graph(self) -> None:
        """A well-formed file describing a bad graph raises InvalidInputError."""
        with pytest.raises(InvalidInputError, match="Self-loop"):
            ProjectParser().parse_yaml("matrix: [[2]]\n")
        with pytest.raises(InvalidInputError, match="outside"):
            ProjectParser().parse_yaml(
                "stages: 2\nactivities:\n  - {source: 1, target: 5, weight: 1}\n"
            )


class TestTextProjects:
    """Test plain text matrix files."""

    def test_whitespace_separated(self, tmp_path: Path) -> None:
        path = tmp_path / "project.txt"
        path.write_text("0 5 3 0\n0 0 0 4\n0 0 0 2\n0 0 0 0\n")

        assert ProjectParser().parse_file(path).to_matrix() == FOUR_STAGE

    def test_commas_comments_and_blank_lines(self) -> None:
        text = "# header\n0, 5, 3, 0\n\n0,0,0,4  # stage 2\n0 , 0 , 0 , 2\n0 0 0 0\n"

        assert ProjectParser().parse_text(text).to_matrix() == FOUR_STAGE

    def test_non_integer_token(self) -> None:
        with pytest.raises(ParseError, match="Line 2"):
            ProjectParser().parse_text("0 1\n0 x\n")

    def test_empty_file(self) -> None:
        with pytest.raises(ParseError, match="no matrix rows"):
            ProjectParser().parse_text("# nothing here\n\n")

    def test_not_square(self) -> None:
        with pytest.raises(InvalidInputError, match="square"):
            ProjectParser().parse_text("0 1 0\n0 0 1\n")


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ParseError, match="File not found"):
        ProjectParser().parse_file(tmp_path / "missing.yaml")


def test_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "project.txt"
    path.write_bytes(b"0 \xff\n")

    with pytest.raises(ParseError, match="Cannot read"):
        ProjectParser().parse_file(path)


def test_directory_path(tmp_path: Path) -> None:
    with pytest.raises(ParseError, match="Cannot read"):
        ProjectParser().parse_file(tmp_path)


def test_bundled_examples() -> None:
    parser = ProjectParser()

    assert parser.parse_file("examples/four_stage.txt").to_matrix() == FOUR_STAGE
    assert parser.parse_file("examples/house.yaml").stage_count() == 7
    assert parser.parse_file("examples/cyclic.yaml").stage_count() == 3
