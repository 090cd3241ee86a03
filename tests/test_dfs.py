import sys

import pytest

from pathfinders import run_dfs
from pathfinders.common import reconstruct_path
from terrain import TerrainMap
from tests.helpers import assert_valid_path, random_map, serpentine_map


def recursive_dfs(terrain_map):
    """Plain recursive depth-first search used as the reference visiting order."""
    came_from = {}
    visited = set()

    def visit(cell):
        if cell == terrain_map.end:
            return True
        visited.add(cell)
        r, c = cell
        for nxt in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
            if not terrain_map.in_bounds(nxt):
                continue
            if nxt in visited or not terrain_map.is_traversable(nxt):
                continue
            came_from[nxt] = cell
            if visit(nxt):
                return True
        return False

    if visit(terrain_map.start):
        return reconstruct_path(came_from, terrain_map.start, terrain_map.end)
    return None


def test_open_grid_visiting_order(open_map):
    path = run_dfs(open_map)
    assert path == [
        (0, 0), (1, 0), (2, 0), (3, 0), (3, 1), (2, 1), (1, 1),
        (0, 1), (0, 2), (1, 2), (2, 2), (3, 2), (3, 3),
    ]


def test_path_is_valid_but_not_shortest(open_map):
    path = run_dfs(open_map)
    assert_valid_path(open_map, path)
    assert len(path) - 1 > 6


def test_walled_goal_returns_none(walled_goal_map):
    assert run_dfs(walled_goal_map) is None


def test_start_equals_end():
    terrain_map = TerrainMap([[1] * 4 for _ in range(4)], (2, 2), (2, 2))
    assert run_dfs(terrain_map) == [(2, 2)]


@pytest.mark.parametrize("seed", range(20))
def test_matches_recursive_order(seed):
    terrain_map = random_map(seed)
    path = run_dfs(terrain_map)
    assert path == recursive_dfs(terrain_map)
    if path is not None:
        assert_valid_path(terrain_map, path)


def test_corridor_longer_than_recursion_limit():
    terrain_map = serpentine_map(101, 40)
    assert terrain_map.rows * terrain_map.cols > sys.getrecursionlimit()
    path = run_dfs(terrain_map)
    assert_valid_path(terrain_map, path)
    assert len(path) == 51 * 40 + 50
