"""Command-line interface for the A* engine.

This module provides the ``solve`` and ``config`` commands.
"""

from .main import main_cli
from .commands import solve_command, config_command
from .utils import setup_logging, save_results, format_path

__all__ = [
    'main_cli',
    'solve_command',
    'config_command',
    'setup_logging',
    'save_results',
    'format_path'
]
