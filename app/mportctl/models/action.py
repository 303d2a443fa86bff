"""Action models for package store mutations.

This module defines data structures for representing store mutations
(install, delete, lock, unlock) and their execution results.
"""

from dataclasses import dataclass
from enum import Enum


class ActionType(Enum):
    """Type of package store mutation.

    Attributes:
        INSTALL: Install a package from the index.
        DELETE: Remove an installed package.
        LOCK: Protect an installed package from upgrade and removal.
        UNLOCK: Remove the protection again.
    """

    INSTALL = "install"
    DELETE = "delete"
    LOCK = "lock"
    UNLOCK = "unlock"


@dataclass(frozen=True, slots=True)
class Action:
    """A single mutation requested from the package store.

    Attributes:
        action_type: The type of mutation.
        package: Name of the package to operate on.
        version: Version involved, when the action targets one.
    """

    action_type: ActionType
    package: str
    version: str | None = None

    def __post_init__(self) -> None:
        """Validate action data after initialization."""
        if not self.package:
            msg = "Package name cannot be empty"
            raise ValueError(msg)

    @property
    def is_install(self) -> bool:
        """Check if this is an install action."""
        return self.action_type == ActionType.INSTALL

    @property
    def is_delete(self) -> bool:
        """Check if this is a delete action."""
        return self.action_type == ActionType.DELETE


@dataclass(frozen=True, slots=True)
class ActionResult:
    """Result of executing a package store mutation.

    Attributes:
        action: The action that was executed.
        success: Whether the action completed successfully.
        message: Optional success message or additional information.
        error: Optional error message if the action failed.
    """

    action: Action
    success: bool
    message: str | None = None
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the action failed."""
        return not self.success


def succeeded(action: Action, message: str | None = None) -> ActionResult:
    """Create a successful result for an action."""
    return ActionResult(action=action, success=True, message=message)


def failed(action: Action, error: str) -> ActionResult:
    """Create a failed result for an action."""
    return ActionResult(action=action, success=False, error=error)
