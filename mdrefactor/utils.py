"""Utility functions for mdrefactor."""

import sys
from typing import TextIO, Optional

from colorama import Fore, Style


def log_msg(msg: str, color=Fore.WHITE, emoji: str = '', stream: Optional[TextIO] = None) -> None:
    """Print a formatted log message with optional color and emoji."""
    prefix = f"{emoji} " if emoji else ''
    print(f"{prefix}{color}{msg}{Style.RESET_ALL}", file=stream or sys.stdout)


def log_error(msg: str) -> None:
    """Print an error message to stderr."""
    log_msg(msg, Fore.RED, '❌', stream=sys.stderr)
