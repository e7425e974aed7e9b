"""
CORS policy registration for the API.

The policy is applied by Starlette's own CORSMiddleware; the subclass below
only scopes it to the policy's path pattern and answers every preflight
instead of rejecting foreign origins, leaving enforcement to the browser.
"""

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.datastructures import Headers
from starlette.responses import PlainTextResponse, Response
from starlette.types import ASGIApp, Receive, Scope, Send

from src.core.config.cors_config import DEFAULT_CORS_POLICY, CORSPolicy
from src.core.errors import CORSRegistrationError
from src.core.utils.patterns import path_matches

logger = structlog.get_logger(__name__)


class PathScopedCORSMiddleware(CORSMiddleware):
    """CORSMiddleware driven by a CORSPolicy and limited to its path pattern."""

    def __init__(self, app: ASGIApp, policy: CORSPolicy = DEFAULT_CORS_POLICY) -> None:
        super().__init__(
            app,
            allow_origins=policy.allowed_origins,
            allow_methods=policy.allowed_methods,
            allow_headers=policy.allowed_headers,
            allow_credentials=False,
            max_age=policy.max_age,
        )
        self.policy = policy

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or not path_matches(scope["path"], self.policy.path_pattern):
            await self.app(scope, receive, send)
            return

        headers = Headers(scope=scope)
        origin = headers.get("origin")

        if scope["method"] == "OPTIONS" and "access-control-request-method" in headers:
            response = self.preflight_response(request_headers=headers)
            await response(scope, receive, send)
            return

        if origin is None:
            await self.app(scope, receive, send)
            return

        if not self.policy.allows_origin(origin):
            logger.debug("cors_origin_not_allowed", origin=origin, path=scope["path"])

        await self.simple_response(scope, receive, send, request_headers=headers)

    def preflight_response(self, request_headers: Headers) -> Response:
        origin = request_headers.get("origin")
        requested_headers = request_headers.get("access-control-request-headers")

        headers = dict(self.preflight_headers)
        if self.policy.allows_origin(origin):
            headers["Access-Control-Allow-Origin"] = origin
        elif origin is not None:
            logger.debug("cors_origin_not_allowed", origin=origin, preflight=True)

        if self.policy.allows_any_header:
            headers["Access-Control-Allow-Headers"] = requested_headers or "*"

        return PlainTextResponse("OK", status_code=200, headers=headers)


def register_cors_policy(app: FastAPI, policy: CORSPolicy = DEFAULT_CORS_POLICY) -> None:
    """
    Install a CORS policy on the application's middleware stack.

    Must be called once, before the app starts serving requests. A second
    call on the same app raises CORSRegistrationError; a call after startup
    raises the framework's RuntimeError.
    """
    if getattr(app.state, "cors_policy", None) is not None:
        raise CORSRegistrationError(app.title)

    app.add_middleware(PathScopedCORSMiddleware, policy=policy)
    app.state.cors_policy = policy

    logger.info(
        "cors_policy_registered",
        path_pattern=policy.path_pattern,
        allowed_origins=list(policy.allowed_origins),
        allowed_methods=list(policy.allowed_methods),
        allowed_headers=list(policy.allowed_headers),
        max_age=policy.max_age,
    )
