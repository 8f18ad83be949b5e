import argparse
import logging
import sys

from orthomaze.algo.binary_tree import Bias
from orthomaze.algo.catalog import ALGORITHMS, DEFAULT_ALGORITHM, create_algorithm
from orthomaze.algo.growing_tree import Method
from orthomaze.core.errors import MazeError
from orthomaze.formatters.color import Color


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def parse_coords(value: str):
    """'(3, 4)' or '3,4' -> (3, 4)"""
    text = value.strip().lstrip("(").rstrip(")")
    parts = text.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError("Start coord should follow the pattern `(0, 0)`")
    try:
        x, y = int(parts[0]), int(parts[1])
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))
    if x < 0 or y < 0:
        raise argparse.ArgumentTypeError("Start coords must not be negative")
    return x, y


def parse_color(value: str) -> Color:
    try:
        return Color.from_hex(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_seed(value: str) -> int:
    seed = int(value)
    if not 0 <= seed < 2 ** 64:
        raise argparse.ArgumentTypeError("Seed must be a valid unsigned 64-bit integer")
    return seed


def parse_bias(value: str) -> Bias:
    try:
        return Bias.from_name(value)
    except KeyError:
        raise argparse.ArgumentTypeError(f"Unknown bias '{value}'")


def parse_method(value: str) -> Method:
    try:
        return Method.from_name(value)
    except KeyError:
        raise argparse.ArgumentTypeError(f"Unknown growing method '{value}'")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="orthomaze: orthogonal maze generator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    # Options shared by every command that builds a maze
    maze_opts = argparse.ArgumentParser(add_help=False)
    maze_opts.add_argument("--algorithm", "-A", default=DEFAULT_ALGORITHM, choices=list(ALGORITHMS), help="Maze generation algorithm")
    maze_opts.add_argument("--width", "-W", type=int, default=10, help="Grid width in a number of cells")
    maze_opts.add_argument("--height", "-H", type=int, default=10, help="Grid height in a number of cells")
    maze_opts.add_argument("--seed", "-S", type=parse_seed, default=None, help="Seed for deterministic generation")
    maze_opts.add_argument("--start-coords", "-C", type=parse_coords, default=None, help="Start coordinate, e.g. '(0,0)'")
    maze_opts.add_argument("--bias", type=parse_bias, default=Bias.NORTH_EAST, help="Bias for binary-tree (north-east, north-west, south-east, south-west)")
    maze_opts.add_argument("--growing-method", type=parse_method, default=Method.NEWEST,
                           help="Method for growing-tree (" + ", ".join(m.value for m in Method) + ")")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", parents=[maze_opts], help="Generate a maze and save it")
    outputs = gen_parser.add_subparsers(dest="output", help="Output format")

    ascii_parser = outputs.add_parser("ascii", help="Save an ASCII representation of the maze")
    ascii_parser.add_argument("--output-path", "-O", required=True, help="Output path")
    ascii_parser.add_argument("--output-type", "-T", choices=["narrow", "broad"], default="narrow", help="ASCII style")

    map_parser = outputs.add_parser("game-map", help="Save an ASCII game map for ray-casting games")
    map_parser.add_argument("--output-path", "-O", required=True, help="Output path")
    map_parser.add_argument("--span", type=int, default=3, help="Distance between any two walls")
    map_parser.add_argument("--passage", default=".", help="Character for a passage")
    map_parser.add_argument("--wall", default="#", help="Character for a wall")
    map_parser.add_argument("--with-start-goal", action="store_true", help="Spawn start 'S' and goal 'G' on the borders")

    image_parser = outputs.add_parser("image", help="Save to a PNG or JPG file")
    image_parser.add_argument("--output-path", "-O", required=True, help="Output path")
    image_parser.add_argument("--wall-size", type=int, default=40, help="Wall size in pixels")
    image_parser.add_argument("--passage-size", type=int, default=40, help="Passage size in pixels")
    image_parser.add_argument("--margin", type=int, default=50, help="Empty space around the maze in pixels")
    image_parser.add_argument("--passage-color", type=parse_color, default=Color(255, 255, 255), help="Passage color, e.g. '#ffffff'")
    image_parser.add_argument("--wall-color", type=parse_color, default=Color(0, 0, 0), help="Wall color, e.g. '#000000'")

    # View Command
    view_parser = subparsers.add_parser("view", parents=[maze_opts], help="Show a maze in a window")
    view_parser.add_argument("--animate", action="store_true", help="Watch the algorithm carve the maze")
    view_parser.add_argument("--solve", action="store_true", help="Draw the path from the top-left to the bottom-right cell")

    # Stats Command
    subparsers.add_parser("stats", parents=[maze_opts], help="Print dead end statistics of a maze")

    return parser


def make_builder(args):
    from orthomaze.maze.builder import OrthogonalMazeBuilder

    algorithm = create_algorithm(args.algorithm, bias=args.bias, method=args.growing_method)
    builder = OrthogonalMazeBuilder().width(args.width).height(args.height).seed(args.seed).algorithm(algorithm)
    if args.start_coords is not None:
        builder.start_coords(args.start_coords)
    return builder


def make_formatter(args):
    if args.output == "ascii":
        from orthomaze.formatters.ascii import AsciiBroad, AsciiNarrow
        return AsciiBroad() if args.output_type == "broad" else AsciiNarrow()
    if args.output == "game-map":
        from orthomaze.formatters.game_map import GameMap
        return GameMap(span=args.span, passage=args.passage, wall=args.wall, with_start_goal=args.with_start_goal)

    from orthomaze.formatters.image import Image
    return Image(wall=args.wall_size, passage=args.passage_size, margin=args.margin,
                 background=args.passage_color, foreground=args.wall_color)


def run_generate(args, logger) -> int:
    logger.info(f"Generating {args.width}x{args.height} maze with {args.algorithm}...")
    maze = make_builder(args).build()

    logger.info(f"Saving maze as {args.output} to {args.output_path}...")
    print(maze.save(args.output_path, make_formatter(args)))
    return 0


def corner_endpoints(width: int, height: int):
    """Top-left to bottom-right, or None when the grid has no cells."""
    if width < 1 or height < 1:
        return None
    return (0, 0), (width - 1, height - 1)


def run_view(args, logger) -> int:
    import random
    from orthomaze.core.grid import Grid
    from orthomaze.core.errors import BuildError
    from orthomaze.viz.renderer import Renderer

    endpoints = None
    if args.solve:
        endpoints = corner_endpoints(args.width, args.height)
        if endpoints is None:
            logger.warning("Nothing to solve in a %dx%d maze", args.width, args.height)

    if args.animate:
        # Drive the algorithm ourselves so the renderer can step it
        builder = make_builder(args)
        config = builder.config()
        if config.start_coords is not None and not config.algorithm.has_start_coords():
            raise BuildError(config.algorithm.name())
        grid = Grid(config.width, config.height)
        gen_iter = config.algorithm.run(grid, config.start_coords, random.Random(config.seed))
        renderer = Renderer(grid, generator=gen_iter, endpoints=endpoints)
    else:
        maze = make_builder(args).build()
        renderer = Renderer(maze.grid, endpoints=endpoints)

    logger.info("Opening window...")
    renderer.init_window()
    renderer.run_loop()
    return 0


def run_stats(args, logger) -> int:
    from orthomaze.core.stats import calculate_stats

    maze = make_builder(args).build()
    stats = calculate_stats(maze.grid)
    logger.info(f"Stats: {stats}")
    print(f"{'DEAD ENDS':<14} | {stats['dead_ends']}")
    print(f"{'CORRIDORS':<14} | {stats['corridors']}")
    print(f"{'INTERSECTIONS':<14} | {stats['intersections']}")
    print(f"{'DEAD END %':<14} | {stats['dead_end_percent']:.2f}")
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("orthomaze")

    if args.command is None or (args.command == "generate" and args.output is None):
        parser.print_help()
        return 2

    logger.debug(f"Running command: {args.command}")

    commands = {"generate": run_generate, "view": run_view, "stats": run_stats}
    try:
        return commands[args.command](args, logger)
    except (MazeError, ValueError) as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
