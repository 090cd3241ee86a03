import terrain_constants as constants


class TerrainMap:
    """Represents a rectangular terrain grid with a start and an end cell."""
    def __init__(self, grid, start, end):
        # Copy rows so the map owns its own snapshot of the terrain
        self.grid = [list(row) for row in grid]
        self.start = tuple(start)
        self.end = tuple(end)

        if not self.grid or not self.grid[0]:
            raise ValueError("Grid must have at least one row and one column")
        width = len(self.grid[0])
        for r, row in enumerate(self.grid):
            if len(row) != width:
                raise ValueError(f"Row {r} has {len(row)} columns, expected {width}")
        if not self.in_bounds(self.start):
            raise ValueError(f"Start {self.start} is outside the {self.rows}x{self.cols} grid")
        if not self.in_bounds(self.end):
            raise ValueError(f"End {self.end} is outside the {self.rows}x{self.cols} grid")

    @classmethod
    def default(cls, size=constants.DEFAULT_MAP_SIZE):
        """All-open square map from the top-left to the bottom-right corner."""
        grid = [[constants.OPEN] * size for _ in range(size)]
        return cls(grid, (0, 0), (size - 1, size - 1))

    @property
    def rows(self):
        return len(self.grid)

    @property
    def cols(self):
        return len(self.grid[0])

    def in_bounds(self, cell):
        """Checks that a (row, col) pair lies inside the grid."""
        r, c = cell
        return 0 <= r < self.rows and 0 <= c < self.cols

    def is_traversable(self, cell):
        """Any nonzero terrain code can be walked on."""
        r, c = cell
        return self.grid[r][c] != constants.BLOCKED

    def copy(self):
        return TerrainMap(self.grid, self.start, self.end)

    def toggle(self, cell):
        """Flips a cell between blocked and open."""
        r, c = cell
        self.grid[r][c] = constants.OPEN if self.grid[r][c] == constants.BLOCKED else constants.BLOCKED

    def mark_path(self, path):
        """Writes the path marker into every path cell except start and end."""
        for cell in path:
            if cell != self.start and cell != self.end:
                r, c = cell
                self.grid[r][c] = constants.PATH

    def clear_path(self):
        """Resets path markers left by a previous run back to open terrain."""
        for row in self.grid:
            for c, value in enumerate(row):
                if value == constants.PATH:
                    row[c] = constants.OPEN

    def render(self):
        """Text view of the grid, one line per row."""
        lines = []
        for r, row in enumerate(self.grid):
            chars = []
            for c, value in enumerate(row):
                if (r, c) == self.start:
                    chars.append(constants.RENDER_CHARS[constants.START])
                elif (r, c) == self.end:
                    chars.append(constants.RENDER_CHARS[constants.GOAL])
                else:
                    chars.append(constants.RENDER_CHARS.get(value, '?'))
            lines.append("".join(chars))
        return "\n".join(lines)

    def __repr__(self):
        return f"TerrainMap {self.rows}x{self.cols}: {self.start} -> {self.end}"
