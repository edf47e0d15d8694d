# pyright: reportExplicitAny=false, reportAny=false
"""Loading configuration from files, the environment and the command line."""

from pathlib import Path
from typing import Any

import platformdirs
from pydantic import ValidationError

from git_status_vars.config._loader import deep_merge, parse_env_vars, read_toml_file
from git_status_vars.config._models import Config, ConfigSource, ConfigSourceName
from git_status_vars.exceptions import ConfigLoadError, ConfigValidationError

APP_NAME = "git-status-vars"
CONFIG_FILE_NAME = "config.toml"


def get_user_config_path() -> Path:
    """Get the platform-specific user config file path.

    On Linux this is ``$XDG_CONFIG_HOME/git-status-vars/config.toml``, which
    defaults to ``~/.config/git-status-vars/config.toml``. The path is
    returned whether or not the file exists.

    Returns:
        Path to the user config file.
    """
    return platformdirs.user_config_path(APP_NAME) / CONFIG_FILE_NAME


def validate_config(data: dict[str, Any], *, source: str | None = None) -> Config:
    """Build a ``Config`` from merged values.

    Args:
        data: Merged configuration values.
        source: Where the values came from, for error messages.

    Returns:
        The validated configuration.

    Raises:
        ConfigValidationError: For the first value the model rejects.
    """
    try:
        return Config.model_validate(data)
    except ValidationError as e:
        error = e.errors()[0]
        key = ".".join(str(part) for part in error.get("loc", ()))
        ctx = error.get("ctx") or {}
        expected = str(ctx.get("expected") or ctx.get("error") or error["msg"])
        msg = f"Invalid configuration value for '{key}'"
        raise ConfigValidationError(
            msg,
            key=key,
            value=error.get("input"),
            expected=expected,
            source=source,
        ) from e


def discover_sources(
    *,
    config_path: Path | None = None,
    include_env: bool = True,
    cli_overrides: dict[str, Any] | None = None,
) -> list[ConfigSource]:
    """Read every configuration source, lowest precedence first.

    Args:
        config_path: Explicit config file. It must exist. When None, the user
            config file is read if present.
        include_env: Read ``GIT_STATUS_VARS_*`` environment variables.
        cli_overrides: Values given on the command line.

    Returns:
        The sources that contributed values, defaults first.

    Raises:
        ConfigLoadError: If a config file is missing (explicit path only),
            unreadable or malformed.
    """
    defaults = Config().model_dump(mode="json")
    sources = [ConfigSource(ConfigSourceName.DEFAULT, values=defaults)]

    if config_path is not None:
        if not config_path.is_file():
            msg = f"Config file not found: {config_path}"
            raise ConfigLoadError(msg, path=config_path)
        file_path: Path | None = config_path
    else:
        user_path = get_user_config_path()
        file_path = user_path if user_path.is_file() else None

    if file_path is not None:
        try:
            values = read_toml_file(file_path)
        except OSError as e:
            msg = f"Failed to read config file: {e}"
            raise ConfigLoadError(msg, path=file_path) from e
        sources.append(
            ConfigSource(ConfigSourceName.FILE, path=file_path, values=values)
        )

    if include_env:
        env_values = parse_env_vars()
        if env_values:
            sources.append(ConfigSource(ConfigSourceName.ENV, values=env_values))

    if cli_overrides:
        sources.append(ConfigSource(ConfigSourceName.CLI, values=cli_overrides))

    return sources


def load_config(
    *,
    config_path: Path | None = None,
    include_env: bool = True,
    cli_overrides: dict[str, Any] | None = None,
) -> tuple[Config, list[ConfigSource]]:
    """Load merged configuration from all sources.

    Sources are merged in precedence order: defaults, then the config file,
    then the environment, then the command line.

    Args:
        config_path: Explicit config file (``--config``).
        include_env: Read ``GIT_STATUS_VARS_*`` environment variables.
        cli_overrides: Values given on the command line.

    Returns:
        The configuration and the sources it was built from.

    Raises:
        ConfigLoadError: If a config file cannot be loaded.
        ConfigValidationError: If the merged values are invalid.
    """
    sources = discover_sources(
        config_path=config_path,
        include_env=include_env,
        cli_overrides=cli_overrides,
    )

    merged: dict[str, Any] = {}
    for source in sources:
        merged = deep_merge(merged, source.values)

    origin = str(config_path) if config_path is not None else None
    return validate_config(merged, source=origin), sources
