"""
Authentication Service Facade following Black Box Design principles.

This module provides:
- A clean interface for authentication that hides implementation details
- Standardized authentication results
- Protocol definitions for swappable implementations
"""

import logging
from dataclasses import dataclass
from typing import Any, Literal, Optional, Protocol

from .errors import ChallengeTransportError, PermissionDenied
from .interfaces import Auther, IdentityStore, RequestBody

logger = logging.getLogger(__name__)

AuthStatus = Literal["authenticated", "denied", "transport_error"]


@dataclass
class AuthResult:
    """
    Standardized authentication result.

    A denied result has no cause attached. Only transport errors carry one.
    """
    status: AuthStatus
    identity: Optional[Any] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.status == "authenticated"

    @classmethod
    def authenticated(cls, identity: Any) -> "AuthResult":
        return cls(status="authenticated", identity=identity)

    @classmethod
    def denied(cls) -> "AuthResult":
        return cls(status="denied")

    @classmethod
    def transport_error(cls, cause: BaseException) -> "AuthResult":
        return cls(status="transport_error", error=cause)


class AuthenticationService(Protocol):
    """Protocol for authentication services."""

    async def authenticate(self, request: RequestBody) -> AuthResult:
        """
        Authenticate a request.

        Args:
            request: Inbound request carrying the credential body

        Returns:
            AuthResult with authentication status and details
        """
        ...


class DefaultAuthenticationService:
    """
    Default implementation of AuthenticationService.

    Binds an auth method to an identity store and realm, and turns the
    method's exceptions into an AuthResult for the HTTP layer.
    """

    def __init__(self, auther: Auther, store: IdentityStore, realm: str):
        """
        Args:
            auther: Auth method (e.g. JSONAuth)
            store: Identity store for user lookups
            realm: Realm passed to every lookup
        """
        self._auth = auther
        self._store = store
        self._realm = realm

    @property
    def method(self) -> str:
        return self._auth.method

    @property
    def login_page(self) -> bool:
        return self._auth.login_page

    async def authenticate(self, request: RequestBody) -> AuthResult:
        try:
            identity = await self._auth.auth(request, self._store, self._realm)
        except PermissionDenied:
            return AuthResult.denied()
        except ChallengeTransportError as e:
            logger.warning(f"Authentication unavailable: {e}")
            return AuthResult.transport_error(e)

        return AuthResult.authenticated(identity)
