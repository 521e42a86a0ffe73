"""Configuration module."""

from transaction_insights.config.configuration import (
    ApiConfig,
    AppConfig,
    ConfigurationError,
    DatabaseConfig,
    LoggingConfig,
    SeedConfig,
    ServerConfig,
    get_config,
    load_config,
    reset_config,
)

__all__ = [
    "ApiConfig",
    "AppConfig",
    "ConfigurationError",
    "DatabaseConfig",
    "LoggingConfig",
    "SeedConfig",
    "ServerConfig",
    "get_config",
    "load_config",
    "reset_config",
]
