"""Pytest configuration and fixtures for critpath tests."""

from __future__ import annotations

import random
from collections.abc import Iterator

import pytest

from critpath.logger import reset_logger

# Stages 1->2 (5), 1->3 (3), 2->4 (4), 3->4 (2)
FOUR_STAGE = [
    [0, 5, 3, 0],
    [0, 0, 0, 4],
    [0, 0, 0, 2],
    [0, 0, 0, 0],
]

# 1 <-> 2
TWO_CYCLE = [
    [0, 1],
    [1, 0],
]

# 1 -> 2 -> 3 -> 2, stage 1 is placeable but 2 and 3 are not
TAIL_CYCLE = [
    [0, 4, 0],
    [0, 0, 2],
    [0, 3, 0],
]


def random_dag(
    seed: int, size: int, density: float = 0.35, max_weight: int = 9
) -> list[list[int]]:
    """Random acyclic matrix: edges only go from a lower to a higher shuffled rank."""
    rng = random.Random(seed)
    ranks = list(range(size))
    rng.shuffle(ranks)
    matrix = [[0] * size for _ in range(size)]
    for i in range(size):
        for j in range(size):
            if ranks[i] < ranks[j] and rng.random() < density:
                matrix[i][j] = rng.randint(1, max_weight)
    return matrix


@pytest.fixture(autouse=True)
def clean_logger() -> Iterator[None]:
    """Keep logger configuration from leaking between tests."""
    reset_logger()
    yield
    reset_logger()

