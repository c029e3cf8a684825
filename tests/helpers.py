"""
Test helpers for Credgate tests.

- An in-memory identity store and user record
- A request stand-in exposing an async body()
- A programmable siteverify endpoint for httpx.MockTransport
"""

import json
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple, Union
from urllib.parse import parse_qs

import httpx

from credgate.config.provider import AuthConfig, ChallengeConfig

RECAPTCHA_HOST = "https://recaptcha.test"
RECAPTCHA_SECRET = "server-secret"


# =============================================================================
# Identity store
# =============================================================================

@dataclass
class User:
    """Minimal identity record."""
    username: str
    password: str
    scope: str = "/"


class InMemoryIdentityStore:
    """Identity store keyed by (realm, username). Missing users raise KeyError."""

    def __init__(self, users: Optional[Dict[Tuple[str, str], User]] = None):
        self.users = users or {}
        self.lookups: List[Tuple[str, str]] = []

    def add(self, realm: str, user: User) -> None:
        self.users[(realm, user.username)] = user

    async def get(self, realm: str, username: str) -> User:
        self.lookups.append((realm, username))
        return self.users[(realm, username)]


class PlainComparator:
    """Comparator treating the stored hash as plaintext. Records its calls."""

    def __init__(self):
        self.calls: List[Tuple[str, str]] = []

    def check(self, secret: str, stored_hash: str) -> bool:
        self.calls.append((secret, stored_hash))
        return secret == stored_hash


# =============================================================================
# Requests
# =============================================================================

class FakeRequest:
    """Stands in for a Starlette Request: only body() is used."""

    def __init__(self, body: Union[bytes, str, dict, None] = None):
        if isinstance(body, dict):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode("utf-8")
        self._body = body or b""

    async def body(self) -> bytes:
        return self._body


def login_body(username: str = "alice", password: str = "wonderland", recaptcha: str = "") -> dict:
    """Build the JSON login document."""
    return {"username": username, "password": password, "recaptcha": recaptcha}


# =============================================================================
# reCAPTCHA service mocking
# =============================================================================

@dataclass
class SiteVerifyMock:
    """
    Programmable siteverify endpoint for httpx.MockTransport.

    Usage:
        def test_something(siteverify):
            siteverify.respond(200, {"success": True})
            client = siteverify.client()
    """
    status_code: int = 200
    payload: Union[dict, str, None] = field(default_factory=lambda: {"success": True})
    error: Optional[Callable[[httpx.Request], Exception]] = None
    requests: List[httpx.Request] = field(default_factory=list)

    def respond(self, status_code: int, payload: Union[dict, str, None]) -> None:
        self.status_code = status_code
        self.payload = payload
        self.error = None

    def fail_with(self, error: Callable[[httpx.Request], Exception]) -> None:
        self.error = error

    def form(self, index: int = -1) -> Dict[str, List[str]]:
        """Decoded form body of a recorded request."""
        return parse_qs(self.requests[index].content.decode("utf-8"))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error(request)
        if isinstance(self.payload, dict):
            return httpx.Response(self.status_code, json=self.payload)
        return httpx.Response(self.status_code, content=(self.payload or "").encode("utf-8"))

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


# =============================================================================
# Configuration
# =============================================================================

class StaticConfigProvider:
    """Config provider returning fixed values."""

    def __init__(self, challenge: ChallengeConfig, realm: str = "/", method: str = "json"):
        self.challenge = challenge
        self.realm = realm
        self.method = method

    def get_challenge_config(self) -> ChallengeConfig:
        return self.challenge

    def get_auth_config(self) -> AuthConfig:
        return AuthConfig(method=self.method, realm=self.realm)
