from .config_data import (
    AppConfig,
    ConfigData,
    DatabaseConfig,
    LoggingConfig,
    UsersConfig,
)
from .config_template import load_templated_yaml, substitute_env_vars

__all__ = [
    "AppConfig",
    "ConfigData",
    "DatabaseConfig",
    "LoggingConfig",
    "UsersConfig",
    "load_templated_yaml",
    "substitute_env_vars",
]
