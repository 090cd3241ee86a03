from pathfinders.common import UnimplementedStrategyError

def run_astar(terrain_map):
    """A* search. Registered under "astar" but has no search behaviour yet."""
    raise UnimplementedStrategyError("A* search is not implemented")
