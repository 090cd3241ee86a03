"""Package exposing grid search strategy implementations."""

from .dfs import run_dfs
from .bfs import run_bfs
from .dijkstra import run_dijkstra
from .gbfs import run_gbfs
from .astar import run_astar
from .hill import run_hill
from .common import (
    InvalidReconstructionError,
    UnimplementedStrategyError,
    reconstruct_path,
)

# Selector keys (lower case) -> strategy function taking a TerrainMap
ALGORITHMS = {
    "dfs": run_dfs,
    "bfs": run_bfs,
    "hill": run_hill,
    "best": run_gbfs,
    "astar": run_astar,
    "dijkstra": run_dijkstra,
}


def get_path_finder(name):
    """Looks up a strategy by name, ignoring case."""
    try:
        return ALGORITHMS[name.strip().lower()]
    except KeyError:
        valid = ", ".join(ALGORITHMS)
        raise ValueError(f"Unknown method: {name} (expected one of: {valid})") from None


def find_path(terrain_map, method):
    """Runs the named strategy over terrain_map: returns a list of cells or None."""
    return get_path_finder(method)(terrain_map)


__all__ = [
    "ALGORITHMS",
    "get_path_finder",
    "find_path",
    "reconstruct_path",
    "run_dfs",
    "run_bfs",
    "run_dijkstra",
    "run_gbfs",
    "run_astar",
    "run_hill",
    "InvalidReconstructionError",
    "UnimplementedStrategyError",
]
