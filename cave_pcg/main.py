#!/usr/bin/env python3
"""
Cellular Automata + Drunk Agent Map Generator

Alternates a density-threshold smoothing pass with a random-walk carver
that stamps rooms, printing the binary map after every iteration.

Usage:
    python -m cave_pcg.main [--config configs/default.yaml] [options]

Examples:
    python -m cave_pcg.main
    python -m cave_pcg.main --config configs/default.yaml --seed 42
    python -m cave_pcg.main --iterations 10 --mode in_place
    python -m cave_pcg.main --quiet --no-summary
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import SMOOTHING_MODES, default_config, load_config
from .model.engine import GenerationEngine
from .export.console import ConsolePrinter
from .export.reporter import Reporter


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Cellular Automata + Drunk Agent Map Generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m cave_pcg.main
    python -m cave_pcg.main --config configs/default.yaml --seed 42
    python -m cave_pcg.main --iterations 10 --mode in_place
    python -m cave_pcg.main --quiet --no-summary
        """
    )

    parser.add_argument('--config', type=Path, default=None,
                        help='Path to YAML configuration file (default: built-in parameters)')

    # Optional overrides
    parser.add_argument('--iterations', type=int, default=None,
                        help='Override number of smoothing/carving iterations')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducibility')
    parser.add_argument('--mode', choices=SMOOTHING_MODES, default=None,
                        help='Smoothing update mode (default: snapshot)')

    parser.add_argument('--quiet', action='store_true', default=False,
                        help='Suppress map output')
    parser.add_argument('--no-summary', dest='summary', action='store_false', default=None,
                        help='Skip the final summary report')
    parser.add_argument('--verbose', action='store_true', default=False,
                        help='Enable debug logging on stderr')

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    # Load configuration
    try:
        if args.config is not None:
            config = load_config(args.config)
        else:
            config = default_config()
    except FileNotFoundError:
        print(f"Error: Configuration file not found: {args.config}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    # Apply CLI overrides
    if args.iterations is not None:
        config.iterations = args.iterations
    if args.seed is not None:
        config.seed = args.seed
    if args.mode is not None:
        config.cellular_automata.mode = args.mode
    if args.summary is not None:
        config.summary = args.summary
    if args.quiet:
        config.quiet = True

    try:
        engine = GenerationEngine(config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    printer = ConsolePrinter(quiet=config.quiet)
    reporter = Reporter(str(args.config) if args.config else '(built-in defaults)', config.seed)

    printer.title()
    final_state = engine.initial_state()
    printer.initial(final_state)
    reporter.update(final_state)

    try:
        for state in engine.run():
            final_state = state
            printer.iteration(state)
            reporter.update(state)
    except KeyboardInterrupt:
        if not config.quiet:
            print("\nGeneration interrupted by user.")

    printer.finished()

    if config.summary and not config.quiet:
        print(reporter.generate_summary(final_state))

    return 0


if __name__ == '__main__':
    sys.exit(main())
