"""
HTTP server configuration.
"""

from dataclasses import dataclass


@dataclass
class ServerConfig:
    """Where uvicorn binds and how the app describes itself."""

    app_name: str = "Banque REST API"
    app_version: str = "0.1.0"
    host: str = "0.0.0.0"
    port: int = 8080
