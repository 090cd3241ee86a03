from pathfinders.common import UnimplementedStrategyError

def run_hill(terrain_map):
    """Hill-Climbing search. Registered under "hill" but has no search behaviour yet."""
    raise UnimplementedStrategyError("Hill-Climbing search is not implemented")
