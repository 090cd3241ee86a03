from terrain_constants import DIRECTIONS


class UnimplementedStrategyError(NotImplementedError):
    """Raised when a registered strategy has no search behaviour yet."""


class InvalidReconstructionError(KeyError):
    """Raised when the predecessor chain does not lead from end back to start."""


def neighbours(terrain_map, cell):
    """Yields in-bounds traversable neighbours of cell in the fixed direction order."""
    r, c = cell
    for dr, dc in DIRECTIONS:
        nxt = (r + dr, c + dc)
        if terrain_map.in_bounds(nxt) and terrain_map.is_traversable(nxt):
            yield nxt


def reconstruct_path(came_from, start, end):
    """Reconstructs the path (list of cells, start to end) from the came_from map."""
    path = []
    seen = set()
    current = end
    while current != start:
        if current in seen:
            raise InvalidReconstructionError(
                f"Predecessor chain loops at {current} without reaching {start}"
            )
        seen.add(current)
        path.append(current)
        try:
            current = came_from[current]
        except KeyError:
            raise InvalidReconstructionError(
                f"No predecessor recorded for {current} while walking back from {end} to {start}"
            ) from None
    path.append(start)
    path.reverse()
    return path
