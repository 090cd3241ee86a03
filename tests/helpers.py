import random

from terrain import TerrainMap


def make_map(rows, start=(0, 0), end=None):
    """Builds a TerrainMap from strings of 0/1 digits."""
    grid = [[int(ch) for ch in row] for row in rows]
    if end is None:
        end = (len(grid) - 1, len(grid[0]) - 1)
    return TerrainMap(grid, start, end)


def assert_valid_path(terrain_map, path):
    """Path runs start to end, every step is one orthogonal move onto open terrain."""
    assert path, "expected a path"
    assert path[0] == terrain_map.start
    assert path[-1] == terrain_map.end
    for (r1, c1), (r2, c2) in zip(path, path[1:]):
        assert abs(r1 - r2) + abs(c1 - c2) == 1
        assert terrain_map.is_traversable((r2, c2))
    assert len(set(path)) == len(path)


def random_map(seed, rows=8, cols=8, density=0.3):
    rng = random.Random(seed)
    grid = [[0 if rng.random() < density else 1 for _ in range(cols)] for _ in range(rows)]
    grid[0][0] = 1
    grid[rows - 1][cols - 1] = 1
    return TerrainMap(grid, (0, 0), (rows - 1, cols - 1))


def serpentine_map(rows, cols):
    """One long corridor winding down the grid, longer than the recursion limit for big sizes."""
    grid = []
    for r in range(rows):
        if r % 2 == 0:
            grid.append([1] * cols)
        else:
            row = [0] * cols
            # gap alternates between the right and left edge
            row[cols - 1 if r % 4 == 1 else 0] = 1
            grid.append(row)
    end = (rows - 1, 0 if (rows - 1) % 4 == 2 else cols - 1)
    return TerrainMap(grid, (0, 0), end)


