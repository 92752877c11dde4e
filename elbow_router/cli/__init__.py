"""
CLI utilities for elbow-router
"""

from .argument_parser import setup_argument_parser
from .config_discovery import discover_config
from .init_command import run_init_command
from .output import format_points, print_batch_summary
from .main import main

__all__ = [
    'setup_argument_parser',
    'discover_config',
    'run_init_command',
    'format_points',
    'print_batch_summary',
    'main',
]
