from pathfinders.common import UnimplementedStrategyError

def run_gbfs(terrain_map):
    """Greedy Best-First Search. Registered under "best" but has no search behaviour yet."""
    raise UnimplementedStrategyError("Best-First search is not implemented")
