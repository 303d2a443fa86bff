"""mportctl configuration and settings.

Configuration is stored in ~/.config/mportctl/config.toml. A missing file
is not an error; every field has a default.
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mportctl.core.errors import ConfigError
from mportctl.core.paths import get_config_path, get_database_path

logger = logging.getLogger(__name__)


class MportConfig(BaseModel):
    """Configuration for the mportctl front-end.

    Attributes:
        database: Path of the local package database snapshot.
        os_release: Override for the running OS release tag.
        delete_command: Command run for each package delete; the package
            name is appended as the last argument.
        delete_timeout: Seconds to wait for one delete command.
    """

    model_config = ConfigDict(extra="forbid")

    database: Annotated[
        Path | None,
        Field(description="Package database path (None = XDG state default)"),
    ] = None
    os_release: Annotated[
        str | None,
        Field(description="OS release override (None = detect)"),
    ] = None
    delete_command: Annotated[
        list[str] | None,
        Field(description="External delete tool, e.g. ['/usr/libexec/mport.delete', '-n']"),
    ] = None
    delete_timeout: Annotated[
        int,
        Field(ge=1, le=3600, description="Timeout in seconds (1-3600)"),
    ] = 300

    @property
    def database_path(self) -> Path:
        """Get the effective database path."""
        if self.database is not None:
            return self.database.expanduser()
        return get_database_path()


def load_config(path: Path | None = None) -> MportConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated MportConfig; defaults when the file does not exist.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return MportConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return MportConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content: {e}") from e
