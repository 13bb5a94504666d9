"""CLI utility functions."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union


def setup_logging(level: int = logging.INFO,
                  format_string: Optional[str] = None) -> None:
    """Setup logging configuration.

    Args:
        level: Logging level
        format_string: Custom format string
    """
    if format_string is None:
        if level <= logging.DEBUG:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_string = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt="%Y-%m-%d %H:%M:%S"
    )


def save_results(results: Dict[str, Any],
                 output_path: Union[str, Path]) -> None:
    """Save results to a JSON file.

    Args:
        results: Results dictionary
        output_path: Output file path
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w') as f:
        json.dump(results, f, indent=2)


def format_path(states: Iterable[Any]) -> str:
    """Render a solution path as ``A -> B -> C``."""
    return " -> ".join(str(state) for state in states)


def format_duration(seconds: float) -> str:
    """Format duration in human-readable format.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted duration string
    """
    if seconds < 0.001:
        return f"{seconds * 1000000:.0f}μs"
    elif seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    elif seconds < 60:
        return f"{seconds:.2f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.1f}s"
