"""
Main configuration class that composes all configs.
"""

import logging
import os

from dotenv import load_dotenv

from src.core.config.cors_config import DEFAULT_CORS_POLICY, CORSPolicy
from src.core.config.logging_config import LoggingConfig
from src.core.config.server_config import ServerConfig

# Load environment variables from a .env file
load_dotenv()

DEFAULT_PORT = 8080


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _log_level_from_env(default: str = "INFO") -> str:
    level = os.getenv("LOG_LEVEL", default).upper()
    # Unknown names fall back rather than crash at import time.
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


class Config:
    """Main configuration class."""

    def __init__(self) -> None:
        self.server = ServerConfig(
            app_name=os.getenv("APP_NAME", "Banque REST API"),
            app_version=os.getenv("APP_VERSION", "0.1.0"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=_int_from_env("PORT", DEFAULT_PORT),
        )

        # CORS policy is declared in code, never read from the environment.
        self.cors: CORSPolicy = DEFAULT_CORS_POLICY

        self.logging = LoggingConfig(
            level=_log_level_from_env(),
            format=os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            file_path=os.getenv("LOG_FILE_PATH"),
        )

        # Development settings
        self.debug = os.getenv("DEBUG", "false").lower() == "true"
        self.environment = os.getenv("ENVIRONMENT", "development")

    def validate(self, cors_policy: CORSPolicy | None = None) -> bool:
        """Validate configuration, checking `cors_policy` in place of the declared one when given."""
        errors = []
        policy = cors_policy or self.cors

        if not 0 < self.server.port < 65536:
            errors.append(f"PORT must be between 1 and 65535, got {self.server.port}")

        if not policy.allowed_origins:
            errors.append("CORS policy must allow at least one origin")

        if not policy.allowed_methods:
            errors.append("CORS policy must allow at least one method")

        if errors:
            raise ValueError(f"Configuration errors: {', '.join(errors)}")

        return True


# Global config instance
config = Config()
