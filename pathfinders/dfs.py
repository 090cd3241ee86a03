from pathfinders.common import neighbours, reconstruct_path

def run_dfs(terrain_map):
    """Depth-First Search: returns some path (list of cells, not necessarily shortest) or None.

    Follows the recursive formulation (goal check on entry, then mark visited and
    descend into neighbours in direction order) using an explicit stack of
    (cell, pending neighbours) so deep corridors do not hit the recursion limit.
    """
    start, goal = terrain_map.start, terrain_map.end

    if start == goal:
        return [start]

    came_from = {}
    visited = {start}
    stack = [(start, neighbours(terrain_map, start))]

    while stack:
        cell, pending = stack[-1]
        for nxt in pending:
            if nxt in visited:
                continue
            came_from[nxt] = cell
            if nxt == goal:
                return reconstruct_path(came_from, start, goal)
            visited.add(nxt)
            stack.append((nxt, neighbours(terrain_map, nxt)))
            break
        else:
            # every neighbour tried, backtrack
            stack.pop()

    return None
