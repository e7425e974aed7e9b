"""
Configuration package - unified access point.

This package provides all configuration classes and the global config instance.
"""

from src.core.config.cors_config import DEFAULT_CORS_POLICY, FRONTEND_ORIGIN, CORSPolicy
from src.core.config.logging_config import LoggingConfig
from src.core.config.server_config import ServerConfig
from src.core.config.settings import Config, config

__all__ = [
    "Config",
    "config",
    "CORSPolicy",
    "DEFAULT_CORS_POLICY",
    "FRONTEND_ORIGIN",
    "LoggingConfig",
    "ServerConfig",
]
