"""Configuration module for Transaction Insights.

Loads settings from environment-specific config files:
- APP_ENV=dev  → config_dev.yaml (local development, small seed timeout)
- APP_ENV=test → config_test.yaml (seeding disabled, throwaway database)
- Default      → config.yaml

Optional overrides are read from the environment (and a .env file):
DATABASE_PATH, SEED_SOURCE_URL, LOG_LEVEL.
Fails fast with clear error messages if configuration is missing or invalid.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv

DEFAULT_SOURCE_URL = "https://s3.amazonaws.com/roxiler.com/product_transaction.json"


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


def _get_project_root() -> Path:
    """Get the project root directory (where config.yaml lives)."""
    # Navigate from transaction_insights/config/ up to project root
    return Path(__file__).parent.parent.parent


def _get_config_filename() -> str:
    """Get config filename based on APP_ENV environment variable.

    Returns:
        Config filename:
        - APP_ENV=dev  → config_dev.yaml
        - APP_ENV=test → config_test.yaml
        - Default      → config.yaml
    """
    app_env = os.environ.get("APP_ENV", "").lower()

    if app_env == "dev":
        return "config_dev.yaml"
    elif app_env == "test":
        return "config_test.yaml"
    else:
        return "config.yaml"


def _load_yaml_config() -> dict:
    """Load configuration from environment-specific config file."""
    config_filename = _get_config_filename()
    config_path = _get_project_root() / config_filename

    if not config_path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {config_path}. "
            f"Set APP_ENV to 'dev' or 'test', or create {config_filename}."
        )

    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def _get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get optional environment variable with default."""
    return os.environ.get(key, default)


def _as_positive_number(section: str, key: str, value) -> float:
    """Coerce a numeric setting, rejecting zero, negatives and garbage."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"'{section}.{key}' must be a number, got {value!r}")
    if number <= 0:
        raise ConfigurationError(f"'{section}.{key}' must be positive, got {value!r}")
    return number


@dataclass(frozen=True)
class DatabaseConfig:
    """Database configuration."""
    path: str


@dataclass(frozen=True)
class SeedConfig:
    """Product seed source configuration."""
    enabled: bool
    source_url: str
    timeout_seconds: float


@dataclass(frozen=True)
class ApiConfig:
    """HTTP API configuration."""
    title: str
    cors_origins: List[str]


@dataclass(frozen=True)
class ServerConfig:
    """Uvicorn server configuration."""
    host: str
    port: int


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""
    level: str


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration container."""
    database: DatabaseConfig
    seed: SeedConfig
    api: ApiConfig
    server: ServerConfig
    logging: LoggingConfig


def load_config() -> AppConfig:
    """
    Load and validate all application configuration.

    Loads from the YAML file selected by APP_ENV, then applies environment
    overrides. Fails fast if configuration is missing or malformed.

    Returns:
        AppConfig: Validated application configuration.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    # Load environment variables from .env file
    load_dotenv()

    yaml_config = _load_yaml_config()

    db_section = yaml_config.get("database", {})
    database_config = DatabaseConfig(
        path=_get_optional_env("DATABASE_PATH", db_section.get("path", "database.db")),
    )

    seed_section = yaml_config.get("seed", {})
    seed_config = SeedConfig(
        enabled=bool(seed_section.get("enabled", True)),
        source_url=_get_optional_env(
            "SEED_SOURCE_URL", seed_section.get("source_url", DEFAULT_SOURCE_URL)
        ),
        timeout_seconds=_as_positive_number(
            "seed", "timeout_seconds", seed_section.get("timeout_seconds", 30)
        ),
    )

    api_section = yaml_config.get("api", {})
    cors_origins = api_section.get("cors_origins", ["*"])
    if isinstance(cors_origins, str):
        cors_origins = [cors_origins]
    api_config = ApiConfig(
        title=api_section.get("title", "Transaction Insights API"),
        cors_origins=list(cors_origins),
    )

    server_section = yaml_config.get("server", {})
    server_config = ServerConfig(
        host=server_section.get("host", "127.0.0.1"),
        port=int(_as_positive_number("server", "port", server_section.get("port", 3000))),
    )

    logging_section = yaml_config.get("logging", {})
    logging_config = LoggingConfig(
        level=_get_optional_env("LOG_LEVEL", logging_section.get("level", "INFO")).upper(),
    )

    return AppConfig(
        database=database_config,
        seed=seed_config,
        api=api_config,
        server=server_config,
        logging=logging_config,
    )


# Module-level singleton for convenience
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get the application configuration singleton.

    Lazy-loads configuration on first access.
    Config file is selected based on APP_ENV environment variable.

    Returns:
        AppConfig: Application configuration.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the config singleton. Useful for testing."""
    global _config
    _config = None
