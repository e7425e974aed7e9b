# API endpoints package

from src.api.cors import PathScopedCORSMiddleware, register_cors_policy

__all__ = [
    "PathScopedCORSMiddleware",
    "register_cors_policy",
]
