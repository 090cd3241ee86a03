import re

import pandas as pd

from terrain import TerrainMap

# Cells on a line are separated by commas and/or whitespace
_SEPARATOR = re.compile(r"[,\s]+")


class MapFormatError(ValueError):
    """Raised when a map file is not a rectangular grid of integers."""


def split_row(line):
    """Splits one map line into its cell tokens."""
    return [tok for tok in _SEPARATOR.split(line.strip()) if tok]


def read_grid(path):
    """Parses a map file into a grid of terrain codes

    Args:
        path (string): Filepath to the map txt/csv file

    Returns:
        list of rows, each a list of ints
    """
    rows = []
    line_numbers = []

    def ignore(line):
        return (not line.strip()) or line.strip().startswith("#")

    with open(path, "r", encoding="utf-8") as f:
        for line_no, raw in enumerate(f, start=1):
            if ignore(raw):
                continue
            rows.append(split_row(raw))
            line_numbers.append(line_no)

    if not rows:
        raise MapFormatError(f"{path}: map file contains no rows")

    width = len(rows[0])
    for line_no, row in zip(line_numbers, rows):
        if len(row) != width:
            raise MapFormatError(
                f"{path}: line {line_no} has {len(row)} cells, expected {width}"
            )

    grid_df = pd.DataFrame(rows)
    try:
        grid_df = grid_df.astype(int)
    except (TypeError, ValueError, OverflowError) as e:
        raise MapFormatError(f"{path}: non-integer cell value ({e})") from e

    return grid_df.values.tolist()


def load_map(path):
    """Loads a map file as a TerrainMap running from the top-left to the bottom-right corner."""
    grid = read_grid(path)
    return TerrainMap(grid, (0, 0), (len(grid) - 1, len(grid[0]) - 1))


def save_grid(grid, path):
    """Writes a grid back out as comma separated rows."""
    pd.DataFrame(grid).to_csv(path, header=False, index=False)
