# Terrain codes stored in the grid
BLOCKED = 0
OPEN = 1
START = 2
GOAL = 3
PATH = 4

# Fixed exploration order shared by every strategy: down, up, right, left
DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))

DEFAULT_MAP_SIZE = 12

# Characters used when printing a grid in the terminal
RENDER_CHARS = {
    BLOCKED: '#',
    OPEN: '.',
    START: 'S',
    GOAL: 'G',
    PATH: '*',
}

# Algorithm keys accepted by pathfinders.get_path_finder (case-insensitive)
ENUM_ALGORITHMS = ['dfs', 'bfs', 'hill', 'best', 'astar', 'dijkstra']
