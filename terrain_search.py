import argparse
import sys

import terrain_constants as constants
from map_reader import load_map, save_grid
from pathfinders import UnimplementedStrategyError, get_path_finder
from terrain import TerrainMap
from search_metrics import execute_with_metrics, format_bytes

EXIT_FOUND = 0
EXIT_NO_PATH = 1
EXIT_ERROR = 2


def parse_cell(text):
    """argparse type for a "row,col" pair."""
    try:
        r, c = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected ROW,COL but got '{text}'") from None
    return r, c


def format_path(path):
    return " -> ".join(f"({r},{c})" for r, c in path)


def build_parser():
    parser = argparse.ArgumentParser(description="Find a path across a terrain grid")
    parser.add_argument('method', type=str.lower, choices=constants.ENUM_ALGORITHMS,
                        help='Search strategy (case-insensitive)')
    parser.add_argument('--map', dest='map_file', default=None,
                        help='Map file of comma/space separated terrain codes; defaults to an open 12x12 grid')
    parser.add_argument('--start', type=parse_cell, default=None, help='Start cell as ROW,COL')
    parser.add_argument('--end', type=parse_cell, default=None, help='End cell as ROW,COL')
    parser.add_argument('--show-grid', action='store_true', help='Print the grid with the path marked')
    parser.add_argument('--save', default=None, help='Write the grid with the path marked to this file')
    metrics = parser.add_mutually_exclusive_group()
    metrics.add_argument('--metrics', '-m', dest='metrics_mode', action='store_const', const='stderr',
                         default='none', help='Print a metrics line on stderr')
    metrics.add_argument('--metrics-stdout', dest='metrics_mode', action='store_const', const='stdout',
                         help='Print a metrics line on stdout')
    return parser


def _print_metrics(metrics_mode, method, path, runtime_s, peak_bytes, rss_after):
    edges = len(path) - 1 if path else 'N/A'
    metrics_line = (
        f"Metrics: method={method} path_length={edges} "
        f"runtime_ms={(runtime_s*1000):.3f} peak_py_mem={format_bytes(peak_bytes)} "
        f"rss_now={format_bytes(rss_after)}"
    )
    if metrics_mode == "stdout":
        print(metrics_line)
    else:
        print(metrics_line, file=sys.stderr)


def main(argv=None):
    """Main function to run the search algorithm; returns the process exit code."""
    args = build_parser().parse_args(argv)

    # 1. Build the map
    try:
        if args.map_file:
            terrain_map = load_map(args.map_file)
            source = args.map_file
        else:
            terrain_map = TerrainMap.default()
            source = "default"
        if args.start is not None or args.end is not None:
            terrain_map = TerrainMap(terrain_map.grid,
                                     args.start or terrain_map.start,
                                     args.end or terrain_map.end)
    except OSError as e:
        print(f"Error: could not read map file: {e}", file=sys.stderr)
        return EXIT_ERROR
    except ValueError as e:  # MapFormatError or start/end outside the grid
        print(f"Error: failed to load map: {e}", file=sys.stderr)
        return EXIT_ERROR

    method = args.method.upper()
    run_fn = get_path_finder(args.method)

    # 2. Run the selected strategy
    try:
        path, runtime_s, peak_bytes, rss_after = execute_with_metrics(run_fn, terrain_map)
    except UnimplementedStrategyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    # 3. Output the result
    print(f"{source} {method}")
    if path is None:
        print("No path found.")
    else:
        print(f"Path: {format_path(path)}")
        print(f"Path length:{len(path) - 1}")
        terrain_map.mark_path(path)

    if args.show_grid:
        print(terrain_map.render())
    if args.save:
        save_grid(terrain_map.grid, args.save)

    if args.metrics_mode in ("stderr", "stdout"):
        _print_metrics(args.metrics_mode, method, path, runtime_s, peak_bytes, rss_after)

    return EXIT_NO_PATH if path is None else EXIT_FOUND


if __name__ == "__main__":
    sys.exit(main())
