from collections import deque
from pathfinders.common import neighbours, reconstruct_path

def run_bfs(terrain_map):
    """Breadth-First Search: returns the shortest path (list of cells) or None."""
    start, goal = terrain_map.start, terrain_map.end

    q = deque([start])
    came_from = {}
    # Mark on enqueue so no cell is queued twice
    visited = {start}

    while q:
        cell = q.popleft()

        if cell == goal:
            return reconstruct_path(came_from, start, goal)

        for nxt in neighbours(terrain_map, cell):
            if nxt not in visited:
                visited.add(nxt)
                came_from[nxt] = cell
                q.append(nxt)

    return None
