"""Main CLI entry point for the A* engine."""

import sys
import argparse
import logging
from typing import List, Optional

from . import commands
from .utils import setup_logging
from astar_engine.domains import DOMAINS


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog='astar-engine',
        description='A* search with incremental cost revision over pluggable state spaces',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  astar-engine solve                            # Solve the river-crossing puzzle
  astar-engine solve --zero-heuristic --trace   # Uniform-cost search, trace events
  astar-engine solve --goal-test expand         # Stop when a goal is popped
  astar-engine config show                      # Show current configuration
  astar-engine config show -k search.goal_test  # Show a single value
  astar-engine config show -o run.yaml          # Save the composed configuration
        """
    )

    # Global options
    parser.add_argument(
        '--config', '-c',
        type=str,
        action='append',
        help='Configuration override (e.g., search.skip_predecessor=false); repeatable'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='count',
        default=0,
        help='Increase verbosity (use -v or -vv)'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress all output except results'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands',
        metavar='COMMAND'
    )

    # Solve command
    solve_parser = subparsers.add_parser(
        'solve',
        help='Run a search from the domain start state',
        description='Run A* from the configured domain start state and print the path'
    )

    solve_parser.add_argument(
        '--domain',
        choices=sorted(DOMAINS),
        help='Problem domain (default: from configuration)'
    )

    solve_parser.add_argument(
        '--zero-heuristic',
        action='store_true',
        help='Use h = 0 everywhere (uniform-cost search)'
    )

    solve_parser.add_argument(
        '--goal-test',
        choices=['generate', 'expand'],
        help='Stop at the first generated goal or the first expanded goal'
    )

    solve_parser.add_argument(
        '--trace',
        action='store_true',
        help='Log frontier, expansion and generation events'
    )

    solve_parser.add_argument(
        '--output', '-o',
        type=str,
        help='Output file for the result (JSON format)'
    )

    # Config command
    config_parser = subparsers.add_parser(
        'config',
        help='Configuration management',
        description='Inspect engine configuration'
    )

    config_subparsers = config_parser.add_subparsers(
        dest='config_action',
        help='Configuration actions'
    )

    show_parser = config_subparsers.add_parser(
        'show',
        help='Show current configuration'
    )

    show_parser.add_argument(
        '--key', '-k',
        type=str,
        help='Show a single value by dotted key (e.g., search.goal_test)'
    )

    show_parser.add_argument(
        '--output', '-o',
        type=str,
        help='Also save the composed configuration to this YAML file'
    )

    config_subparsers.add_parser(
        'validate',
        help='Validate configuration'
    )

    return parser


def main_cli(args: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        args: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    # Setup logging based on verbosity
    if parsed_args.quiet:
        log_level = logging.ERROR
    elif parsed_args.verbose == 0:
        log_level = logging.WARNING
    elif parsed_args.verbose == 1:
        log_level = logging.INFO
    else:
        log_level = logging.DEBUG

    setup_logging(log_level)
    logger = logging.getLogger(__name__)

    try:
        if not parsed_args.command:
            parser.print_help()
            return 1

        if parsed_args.command == 'solve':
            return commands.solve_command(parsed_args)
        if parsed_args.command == 'config':
            return commands.config_command(parsed_args)

        logger.error(f"Unknown command: {parsed_args.command}")
        return 1

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130  # Standard exit code for SIGINT
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        return 1


def main() -> None:
    """Entry point for console script."""
    sys.exit(main_cli())


if __name__ == '__main__':
    main()
