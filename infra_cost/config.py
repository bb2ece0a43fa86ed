# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load configuration from environment variables / .env file.
#   Provides typed config objects to all other modules.
#
# CLASSES:
# --------
# - MongoConfig (dataclass)
#     host: str            (default "localhost")
#     port: int            (default 27017)
#     user: str | None     (default None)
#     password: str | None (default None)
#     database: str        (default "infraDB")
#
# - AppConfig (dataclass)
#     mongo: MongoConfig
#     collection_name: str (default "infrastructure")
#     report_limit: int    (default 3)
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Forget the singleton so the next get_config() re-reads the environment.
#
# USAGE:
# ------
#   from infra_cost.config import get_config
#   config = get_config()
#   print(config.mongo.database)
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv

from infra_cost.exceptions import ConfigurationError


@dataclass
class MongoConfig:
    """MongoDB database configuration."""
    host: str = "localhost"
    port: int = 27017
    user: Optional[str] = None
    password: Optional[str] = None
    database: str = "infraDB"


@dataclass
class AppConfig:
    """Main application configuration."""
    mongo: MongoConfig = field(default_factory=MongoConfig)
    collection_name: str = "infrastructure"
    report_limit: int = 3


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _env_int(name: str, default: int, minimum: int) -> int:
    """Parse an int env var, raising ConfigurationError on bad values."""
    raw = os.getenv(name, str(default))
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e
    if value < minimum:
        raise ConfigurationError(f"{name} must be >= {minimum}, got {value}")
    return value


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.
    
    Returns:
        AppConfig: Application configuration
    """
    global _config_instance
    
    if _config_instance is not None:
        return _config_instance
    
    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)
    
    mongo_config = MongoConfig(
        host=os.getenv("MONGO_HOST", "localhost"),
        port=_env_int("MONGO_PORT", 27017, minimum=1),
        user=os.getenv("MONGO_USER") or None,
        password=os.getenv("MONGO_PASSWORD") or None,
        database=os.getenv("MONGO_DATABASE", "infraDB")
    )
    
    _config_instance = AppConfig(
        mongo=mongo_config,
        collection_name=os.getenv("MONGO_COLLECTION", "infrastructure"),
        report_limit=_env_int("REPORT_LIMIT", 3, minimum=0)
    )
    
    return _config_instance


def reset_config() -> None:
    """Drop the cached configuration (mainly for tests)."""
    global _config_instance
    _config_instance = None
