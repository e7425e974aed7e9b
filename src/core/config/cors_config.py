"""
CORS configuration.
"""

from dataclasses import dataclass

FRONTEND_ORIGIN = "http://localhost:3000"


@dataclass(frozen=True)
class CORSPolicy:
    """A single, global CORS rule applied to every request matching `path_pattern`."""

    path_pattern: str = "/**"
    allowed_origins: tuple[str, ...] = (FRONTEND_ORIGIN,)
    allowed_methods: tuple[str, ...] = ("GET", "POST", "PUT", "DELETE", "OPTIONS")
    allowed_headers: tuple[str, ...] = ("*",)
    max_age: int = 1800  # seconds a browser may cache the preflight answer

    def __post_init__(self) -> None:
        # Frozen: go through object.__setattr__ to normalise the sequences.
        object.__setattr__(self, "allowed_origins", tuple(self.allowed_origins))
        object.__setattr__(self, "allowed_methods", tuple(m.upper() for m in self.allowed_methods))
        object.__setattr__(self, "allowed_headers", tuple(self.allowed_headers))

    @property
    def allows_any_header(self) -> bool:
        return "*" in self.allowed_headers

    def allows_origin(self, origin: str | None) -> bool:
        """Exact, case-sensitive match against the allowed origins."""
        return origin is not None and origin in self.allowed_origins


DEFAULT_CORS_POLICY = CORSPolicy()
