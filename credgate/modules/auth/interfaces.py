"""Authentication interfaces following Black Box Design principles."""
from typing import Optional, Protocol


class Identity(Protocol):
    """A user record owned by the identity store."""

    password: str  # stored password hash


class IdentityStore(Protocol):
    """Protocol for user lookups."""

    async def get(self, realm: str, username: str) -> Optional[Identity]:
        """
        Look up a user.

        Args:
            realm: Scoping namespace for the username
            username: Username as supplied by the client

        Returns:
            The identity. Raising or returning None both mean "not found".
        """
        ...


class SecretComparator(Protocol):
    """Protocol for plaintext-vs-hash password comparison."""

    def check(self, secret: str, stored_hash: str) -> bool:
        """Return True if secret matches stored_hash."""
        ...


class ChallengeVerifier(Protocol):
    """Protocol for human-verification challenge checks - allows swappable implementations."""

    async def verify(self, response_token: str) -> bool:
        """
        Verify a challenge response token.

        Args:
            response_token: Token produced by the client-side widget

        Returns:
            True if the remote service accepted the token

        Raises:
            ChallengeTransportError: If the service could not be consulted
        """
        ...


class RequestBody(Protocol):
    """Anything that can hand over its raw body (Starlette's Request does)."""

    async def body(self) -> bytes:
        ...


class Auther(Protocol):
    """Protocol for authentication methods."""

    method: str

    @property
    def login_page(self) -> bool:
        """Whether this method is driven by a login form."""
        ...

    async def auth(self, request: RequestBody, store: IdentityStore, realm: str) -> Identity:
        """
        Authenticate a request.

        Returns:
            The authenticated identity

        Raises:
            PermissionDenied: Credential rejected
            ChallengeTransportError: Challenge service unavailable
        """
        ...
