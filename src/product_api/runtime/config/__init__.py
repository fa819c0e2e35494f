"""Configuration models and loaders."""

from .config_data import (
    ApiConfig,
    AppConfig,
    ConfigData,
    DatabaseConfig,
    LoggingConfig,
    ProductsConfig,
)
from .config_template import load_templated_yaml, substitute_env_vars
from .settings import EnvironmentVariables

__all__ = [
    "ApiConfig",
    "AppConfig",
    "ConfigData",
    "DatabaseConfig",
    "EnvironmentVariables",
    "LoggingConfig",
    "ProductsConfig",
    "load_templated_yaml",
    "substitute_env_vars",
]
