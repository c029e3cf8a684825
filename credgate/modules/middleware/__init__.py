"""
Login Dependency Module - Black Box Interface

Purpose: Run the credential verifier from a FastAPI route
Interface: login_dependency() returns a dependency yielding the identity
Hidden: Result-to-HTTP mapping, error formatting

Routing and session issuance stay with the application.
"""

import logging
from typing import Any, Awaitable, Callable

from fastapi import HTTPException, Request

from ..auth.service import AuthenticationService

logger = logging.getLogger(__name__)

DENIED_DETAIL = "Permission denied"
UNAVAILABLE_DETAIL = "Authentication service unavailable"


def login_dependency(auth_service: AuthenticationService) -> Callable[[Request], Awaitable[Any]]:
    """
    Build a FastAPI dependency that authenticates the request body.

    Args:
        auth_service: Authentication service facade

    Returns:
        Async dependency returning the authenticated identity. Raises
        HTTP 403 on any rejected credential and HTTP 502 when the
        reCAPTCHA service could not be consulted.
    """

    async def authenticate_request(request: Request) -> Any:
        result = await auth_service.authenticate(request)

        if result.ok:
            return result.identity

        if result.status == "transport_error":
            logger.error(f"Login on {request.url.path} failed upstream: {result.error}")
            raise HTTPException(status_code=502, detail=UNAVAILABLE_DETAIL)

        raise HTTPException(status_code=403, detail=DENIED_DETAIL)

    return authenticate_request
