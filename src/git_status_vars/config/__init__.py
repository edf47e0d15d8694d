"""Configuration for git-status-vars.

Settings come from, in increasing precedence: built-in defaults, the user
config file (or the file named by ``--config``), ``GIT_STATUS_VARS_*``
environment variables, and command line flags.
"""

from git_status_vars.config._load import (
    get_user_config_path,
    load_config,
    validate_config,
)
from git_status_vars.config._loader import (
    ENV_PREFIX,
    copy_value,
    deep_merge,
    parse_env_vars,
    read_toml_file,
    set_nested_key,
)
from git_status_vars.config._models import (
    DEFAULT_TIMEOUT,
    Config,
    ConfigSource,
    ConfigSourceName,
    LogFormat,
    LoggingConfig,
    LogLevel,
)

__all__ = [
    "DEFAULT_TIMEOUT",
    "ENV_PREFIX",
    "Config",
    "ConfigSource",
    "ConfigSourceName",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "copy_value",
    "deep_merge",
    "get_user_config_path",
    "load_config",
    "parse_env_vars",
    "read_toml_file",
    "set_nested_key",
    "validate_config",
]
