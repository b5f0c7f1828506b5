#!/usr/bin/env python3
"""
Command-line entry point.

Usage:
    difflife                              # prompt for width and height, then animate
    difflife run -W 40 -H 20 --seed 7     # seeded random start
    difflife run -W 20 -H 20 --pattern glider --display debug
    difflife verify -W 64 -H 64 -n 100    # incremental vs brute force
    difflife bench -W 128 -H 128 -n 50 --csv results.csv
"""

import argparse
import sys
from pathlib import Path

from loguru import logger

from difflife import __version__
from difflife.bench import BenchmarkRunner
from difflife.config import Config, ConfigError, load_config
from difflife.grid import BoolGrid
from difflife.patterns import from_pattern, pattern_names
from difflife.render import DISPLAY_MODES, RENDERERS, RESET
from difflife.simulation import Simulation
from difflife.verify import VerificationRunner

COMMANDS = ("run", "verify", "bench")


def setup_logging(level: str = "WARNING", log_file: Path | None = None) -> None:
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, level=level.upper())
    if log_file is not None:
        logger.add(log_file, rotation="10 MB", retention="30 days", level="DEBUG")


def prompt_dimensions(config: Config) -> Config:
    """Ask for whichever of width and height is missing."""
    print("Enter width and height to use:")
    values = {}
    for name in ("width", "height"):
        if getattr(config, name) is not None:
            continue
        raw = input(f"{name}: ")
        try:
            values[name] = int(raw)
        except ValueError:
            raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    return config.with_overrides(**values)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="difflife",
        description="Conway's Game of Life on a torus, stepped by incremental neighbour counts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--width", "-W", type=int, help="Grid width")
    common.add_argument("--height", "-H", type=int, help="Grid height")
    common.add_argument("--generations", "-n", type=int, help="Number of generations")
    common.add_argument("--seed", type=int, help="Random seed for the initial grid")
    common.add_argument("--log-level", help="stderr log level (default: WARNING)")
    common.add_argument("--log-file", type=Path, help="Also log at DEBUG to this file")

    run = subparsers.add_parser("run", parents=[common], help="Animate the simulation in the terminal")
    run.add_argument("--config", "-c", type=Path, help="TOML configuration file")
    run.add_argument("--pause", type=float, help="Seconds to wait between generations (default: 0.067)")
    run.add_argument("--pattern", choices=pattern_names(), help="Start from a single pattern instead of noise")
    run.add_argument("--display", choices=DISPLAY_MODES, help="What to draw each generation (default: grid)")

    verify = subparsers.add_parser("verify", parents=[common], help="Check incremental stepping against brute force")
    verify.add_argument("--verbose", "-v", action="store_true", help="Show every generation's fingerprint")

    bench = subparsers.add_parser("bench", parents=[common], help="Time incremental stepping against brute force")
    bench.add_argument("--warmup", type=int, default=5, help="Warm-up generations (default: 5)")
    bench.add_argument("--csv", type=Path, help="Save results to this CSV file")

    return parser


def resolve_config(args: argparse.Namespace) -> Config:
    config = load_config(args.config) if getattr(args, "config", None) else Config()
    return config.with_overrides(
        width=args.width,
        height=args.height,
        generations=args.generations,
        seed=args.seed,
        pause=getattr(args, "pause", None),
        pattern=getattr(args, "pattern", None),
        display=getattr(args, "display", None),
        log_level=args.log_level,
        log_file=args.log_file,
    )


def run_command(config: Config) -> int:
    if config.pattern is not None:
        grid = from_pattern(config.width, config.height, config.pattern)
    else:
        grid = BoolGrid.random(config.width, config.height, seed=config.seed)

    simulation = Simulation(grid)
    render = RENDERERS.get(config.display)
    try:
        simulation.run(config.generations, render=render, pause=config.pause)
    except KeyboardInterrupt:
        sys.stdout.write(RESET + "\n")
        logger.warning(f"Interrupted at generation {simulation.generation}")
        return 130
    return 0


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv or argv[0] not in (*COMMANDS, "-h", "--help", "--version"):
        argv.insert(0, "run")
    args = build_parser().parse_args(argv)

    setup_logging()
    try:
        config = resolve_config(args)
        if args.command == "run":
            print("Game of life program starting.")
            if config.width is None or config.height is None:
                config = prompt_dimensions(config)
        else:
            config = config.with_overrides(
                width=config.width if config.width is not None else 64,
                height=config.height if config.height is not None else 64,
                generations=args.generations if args.generations is not None else 100,
                seed=config.seed if config.seed is not None else 42,
            )
        config.validate()
    except (ConfigError, OSError, EOFError) as e:
        logger.error(f"Configuration failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print()
        logger.warning("Interrupted before the run started")
        return 130

    setup_logging(config.log_level, config.log_file)
    logger.debug(f"Configuration: {config}")

    if args.command == "verify":
        runner = VerificationRunner(config.width, config.height, config.generations, config.seed, verbose=args.verbose)
        return 0 if runner.run() else 1

    if args.command == "bench":
        runner = BenchmarkRunner(config.width, config.height, config.generations, config.seed, warmup=args.warmup)
        ok = runner.run()
        if args.csv is not None:
            runner.save_csv(args.csv)
        return 0 if ok else 1

    return run_command(config)


if __name__ == "__main__":
    sys.exit(main())
