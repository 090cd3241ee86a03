import heapq
import itertools
from pathfinders.common import neighbours, reconstruct_path

# Every move between adjacent cells costs the same
STEP_COST = 1

def run_dijkstra(terrain_map):
    """
    Dijkstra's algorithm - uniform-cost search over the 4-connected grid.
    Args:
        terrain_map: TerrainMap with grid, start and end
    Returns:
        list of (row, col) cells from start to end inclusive, or None
    """
    start, goal = terrain_map.start, terrain_map.end

    g_score = {start: 0}
    came_from = {}
    visited = set()
    # Equal distances pop in insertion order, which keeps results reproducible
    counter = itertools.count()
    heap = [(0, next(counter), start)]  # (cost, counter, cell)
    while heap:
        cost, _cnt, cell = heapq.heappop(heap)
        if cell in visited:
            continue
        visited.add(cell)
        if cell == goal:
            return reconstruct_path(came_from, start, goal)
        for neighbor in neighbours(terrain_map, cell):
            new_cost = cost + STEP_COST
            # Only add if we found a strictly better path
            if neighbor not in visited and new_cost < g_score.get(neighbor, float('inf')):
                g_score[neighbor] = new_cost
                came_from[neighbor] = cell
                heapq.heappush(heap, (new_cost, next(counter), neighbor))
    return None
