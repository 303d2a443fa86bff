"""Error kinds and process exit codes.

Every failure the command layer can report maps to one exception class
and one exit code. Commands catch ``MportError`` and exit with
``exc.exit_code``.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes returned by mportctl commands."""

    OK = 0
    FAILURE = 1
    INVALID_INPUT = 2
    NO_PACKAGES = 3
    NOT_FOUND = 4
    AMBIGUOUS = 5
    STORE_ERROR = 8


class MportError(Exception):
    """Base exception for mportctl errors."""

    exit_code: ExitCode = ExitCode.FAILURE


class PackageNotFoundError(MportError):
    """Raised when an identifier or name resolves to nothing."""

    exit_code = ExitCode.NOT_FOUND

    def __init__(self, name: str, where: str = "the index") -> None:
        self.name = name
        super().__init__(f"Package {name} not found in {where}.")


class AmbiguousSelectionError(MportError):
    """Raised when several candidates match and no valid choice was made."""

    exit_code = ExitCode.AMBIGUOUS


class InvalidInputError(MportError):
    """Raised for malformed user input such as an empty search."""

    exit_code = ExitCode.INVALID_INPUT


class StoreError(MportError):
    """Raised when the package store fails to answer a query."""

    exit_code = ExitCode.STORE_ERROR


class ConfigError(MportError):
    """Raised when the configuration file cannot be loaded."""

    exit_code = ExitCode.INVALID_INPUT
