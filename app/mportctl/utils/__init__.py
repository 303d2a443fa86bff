"""Utility modules for mportctl.

This module exports commonly used utility functions.
"""

from mportctl.utils.formatting import (
    console,
    emit,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from mportctl.utils.shell import CommandResult, command_exists, run_command

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "emit",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
]
