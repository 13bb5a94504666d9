"""CLI command implementations."""

import logging
from typing import List, Optional

from omegaconf import DictConfig, OmegaConf

from astar_engine.config import (
    ConfigManager, load_config, validate_config, check_config_consistency, ConfigValidationError
)
from astar_engine.core.data_models import SearchResult
from astar_engine.core.state import SearchState, StateContractError
from astar_engine.domains import DOMAINS
from astar_engine.search.astar import AStarSearcher, SearchConfig
from astar_engine.search.trace import LoggingTracer, RecordingTracer, SearchTracer

from .utils import save_results, format_path, format_duration

logger = logging.getLogger(__name__)

TRACE_LOGGER = 'astar_engine.search.trace'


def build_overrides(args) -> List[str]:
    """Translate command line flags into Hydra overrides."""
    overrides = []
    if getattr(args, 'domain', None):
        overrides.append(f"domain.name={args.domain}")
    if getattr(args, 'zero_heuristic', False):
        overrides.append("domain.zero_heuristic=true")
    if getattr(args, 'goal_test', None):
        overrides.append(f"search.goal_test={args.goal_test}")
    if getattr(args, 'trace', False):
        overrides.append("trace.enabled=true")
    if getattr(args, 'config', None):
        overrides.extend(args.config)
    return overrides


def create_tracer(config: DictConfig) -> Optional[SearchTracer]:
    """Build the trace sink described by the ``trace`` config section."""
    trace_config = config.get('trace', {})
    if not trace_config or not trace_config.get('enabled', False):
        return None

    if trace_config.get('mode', 'logging') == 'recording':
        return RecordingTracer()

    level = logging.getLevelName(str(trace_config.get('level', 'INFO')).upper())
    trace_logger = logging.getLogger(TRACE_LOGGER)
    trace_logger.setLevel(level)
    return LoggingTracer(level=level, log=trace_logger)


def apply_logging_config(config: DictConfig, args) -> None:
    """Use ``logging.level`` from config unless verbosity flags were given."""
    if getattr(args, 'verbose', 0) or getattr(args, 'quiet', False):
        return
    level = str(config.get('logging', {}).get('level', 'WARNING')).upper()
    logging.getLogger().setLevel(logging.getLevelName(level))


def create_start_state(config: DictConfig) -> SearchState:
    """Start state of the configured domain."""
    domain_config = config.get('domain', {})
    factory = DOMAINS[domain_config.get('name', 'river-crossing')]
    return factory(zero_heuristic=bool(domain_config.get('zero_heuristic', False)))


def print_result(result: SearchResult, quiet: bool = False) -> None:
    if result.success:
        print("Winning state reached.")
        print(format_path(result.path))
    else:
        print("No path to goal!")

    if not quiet:
        print(f"\nTransitions: {result.num_transitions}")
        print(f"Nodes expanded: {result.nodes_expanded}")
        print(f"Nodes generated: {result.nodes_generated}")
        print(f"Computation time: {format_duration(result.computation_time)}")


def solve_command(args) -> int:
    """Handle solve command.

    The exit code reflects configuration or contract failures only; finding
    no path is a normal outcome.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    try:
        config = load_config(overrides=build_overrides(args))
    except Exception as e:
        logger.error(f"Failed to load configuration: {e}")
        return 1

    apply_logging_config(config, args)

    try:
        searcher = AStarSearcher(SearchConfig.from_config(config), create_tracer(config))
        start = create_start_state(config)
        result = searcher.search(start)
    except StateContractError as e:
        logger.error(f"Search aborted, state contract violated: {e}")
        return 1

    print_result(result, quiet=getattr(args, 'quiet', False))

    if getattr(args, 'output', None):
        save_results(result.to_dict(), args.output)
        logger.info(f"Results saved to {args.output}")

    return 0


def config_command(args) -> int:
    """Handle config command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    overrides = list(getattr(args, 'config', None) or [])
    try:
        if args.config_action == 'show':
            manager = ConfigManager()
            config = manager.load_config(overrides=overrides)

            key = getattr(args, 'key', None)
            if key:
                value = manager.get_parameter(key)
                if value is None:
                    print(f"Unknown configuration key: {key}")
                    return 1
                if isinstance(value, DictConfig):
                    value = OmegaConf.to_yaml(value, resolve=True)
                print(value)
            else:
                print("Current Configuration:")
                print("=" * 50)
                print(OmegaConf.to_yaml(config, resolve=True))

            if getattr(args, 'output', None):
                path = manager.save_config(args.output)
                print(f"Configuration saved to {path}")
            return 0

        elif args.config_action == 'validate':
            try:
                config = load_config(overrides=overrides, validate=False)
                validate_config(config)
            except ConfigValidationError as e:
                print(f"Configuration validation failed: {e}")
                return 1

            issues = check_config_consistency(config)
            for issue in issues:
                print(f"Warning: {issue}")
            print("Configuration is valid")
            return 0

        else:
            print("Unknown config action")
            return 1

    except Exception as e:
        logger.error(f"Config command failed: {e}")
        return 1
