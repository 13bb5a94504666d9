"""Configuration validation for the A* engine."""

import logging
from typing import List

from omegaconf import DictConfig

logger = logging.getLogger(__name__)

GOAL_TEST_MODES = ('generate', 'expand')
TRACE_MODES = ('logging', 'recording')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigValidationError(Exception):
    """Exception raised when configuration validation fails."""
    pass


def validate_config(config: DictConfig) -> None:
    """Validate the complete configuration.

    Args:
        config: Configuration to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        validate_search_config(config.get('search', {}))
        validate_trace_config(config.get('trace', {}))
        validate_domain_config(config.get('domain', {}))
        validate_logging_config(config.get('logging', {}))

        logger.info("Configuration validation passed")

    except ConfigValidationError:
        raise
    except Exception as e:
        raise ConfigValidationError(f"Configuration validation failed: {e}")


def _check_bool(section: DictConfig, key: str, prefix: str) -> None:
    value = section.get(key, False)
    if not isinstance(value, bool):
        raise ConfigValidationError(f"{prefix}.{key} must be boolean, got {value!r}")


def validate_search_config(search_config: DictConfig) -> None:
    """Validate search configuration section.

    Args:
        search_config: Search configuration section
    """
    if not search_config:
        return

    goal_test = search_config.get('goal_test', 'generate')
    if goal_test not in GOAL_TEST_MODES:
        raise ConfigValidationError(
            f"search.goal_test must be one of {GOAL_TEST_MODES}, got {goal_test!r}"
        )

    for key in ('skip_predecessor', 'check_contracts', 'check_invariants'):
        _check_bool(search_config, key, 'search')


def validate_trace_config(trace_config: DictConfig) -> None:
    """Validate trace configuration section."""
    if not trace_config:
        return

    _check_bool(trace_config, 'enabled', 'trace')

    mode = trace_config.get('mode', 'logging')
    if mode not in TRACE_MODES:
        raise ConfigValidationError(f"trace.mode must be one of {TRACE_MODES}, got {mode!r}")

    level = str(trace_config.get('level', 'INFO')).upper()
    if level not in LOG_LEVELS:
        raise ConfigValidationError(f"trace.level must be one of {LOG_LEVELS}, got {level!r}")


def validate_domain_config(domain_config: DictConfig) -> None:
    """Validate domain configuration section."""
    if not domain_config:
        return

    # Imported lazily so the config package does not pull in domain modules
    from astar_engine.domains import DOMAINS

    name = domain_config.get('name', 'river-crossing')
    if name not in DOMAINS:
        raise ConfigValidationError(
            f"domain.name must be one of {sorted(DOMAINS)}, got {name!r}"
        )
    _check_bool(domain_config, 'zero_heuristic', 'domain')


def validate_logging_config(logging_config: DictConfig) -> None:
    """Validate logging configuration section."""
    if not logging_config:
        return

    level = str(logging_config.get('level', 'WARNING')).upper()
    if level not in LOG_LEVELS:
        raise ConfigValidationError(f"logging.level must be one of {LOG_LEVELS}, got {level!r}")


def check_config_consistency(config: DictConfig) -> List[str]:
    """Check configuration consistency and return issues.

    Args:
        config: Configuration to check

    Returns:
        List of consistency issues
    """
    issues = []

    trace_config = config.get('trace', {})
    logging_level = str(config.get('logging', {}).get('level', 'WARNING')).upper()
    if trace_config and trace_config.get('enabled', False) and trace_config.get('mode') == 'logging':
        trace_level = str(trace_config.get('level', 'INFO')).upper()
        if LOG_LEVELS.index(trace_level) < LOG_LEVELS.index(logging_level):
            issues.append(
                f"trace.level={trace_level} is below logging.level={logging_level}; "
                f"trace events will be filtered out"
            )

    search_config = config.get('search', {})
    if search_config and not search_config.get('check_contracts', True) \
            and search_config.get('check_invariants', False):
        issues.append("search.check_invariants is enabled while search.check_contracts is disabled")

    return issues
