"""
JSON credential authentication.

Reads ``{"username", "password", "recaptcha"}`` from the request body,
checks the reCAPTCHA token when a verifier is wired in, then looks up the
user and compares the password against the stored hash.

Every rejection is the same ``PermissionDenied``. Only a reCAPTCHA
transport failure escapes with detail.
"""

import asyncio
import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .errors import PermissionDenied
from .interfaces import ChallengeVerifier, Identity, IdentityStore, RequestBody, SecretComparator
from .passwords import BcryptComparator
from ...config.provider import METHOD_JSON_AUTH

logger = logging.getLogger(__name__)

# bcrypt hash checked when the user does not exist, so that an unknown
# username costs the same as a wrong password.
DECOY_HASH = "$2b$12$EixZaYVK1fsbw1ZfbX3OXePaWxn96p36WQoeG6Lruj3vjPGga31lW"


class CredentialPayload(BaseModel):
    """Login body. Holds a plaintext password, so it is never persisted or logged."""

    model_config = ConfigDict(strict=True, extra="ignore")

    username: str = ""
    password: str = Field("", repr=False)
    recaptcha: str = Field("", repr=False)

    @model_validator(mode="before")
    @classmethod
    def _match_keys_case_insensitively(cls, data: Any) -> Any:
        """Accept "Username", "PASSWORD" etc. An exact key wins over a folded one."""
        if not isinstance(data, dict):
            return data

        matched = {key: value for key, value in data.items() if key in cls.model_fields}
        for key, value in data.items():
            folded = key.lower()
            if folded in cls.model_fields and folded not in matched:
                matched[folded] = value
        return matched


class JSONAuth:
    """
    Authenticates requests carrying JSON credentials.

    The reCAPTCHA check is decided once, at construction: pass a verifier to
    enable it or None to skip it entirely.
    """

    method = METHOD_JSON_AUTH

    def __init__(
        self,
        recaptcha: Optional[ChallengeVerifier] = None,
        comparator: Optional[SecretComparator] = None,
        decoy_hash: str = DECOY_HASH,
    ):
        """
        Args:
            recaptcha: Challenge verifier, or None when reCAPTCHA is disabled
            comparator: Password comparator (bcrypt by default)
            decoy_hash: Hash compared against when the user is unknown
        """
        self.recaptcha = recaptcha
        self.comparator = comparator or BcryptComparator()
        self.decoy_hash = decoy_hash

    @property
    def login_page(self) -> bool:
        return True

    async def auth(self, request: RequestBody, store: IdentityStore, realm: str) -> Identity:
        """
        Authenticate the user via a JSON document in the request body.

        Args:
            request: Inbound request exposing ``await request.body()``
            store: Identity store to look the user up in
            realm: Scope for the username lookup

        Returns:
            The authenticated identity

        Raises:
            PermissionDenied: For any rejected credential
            ChallengeTransportError: If the reCAPTCHA service failed
        """
        cred = await self._decode(request)

        if self.recaptcha is not None:
            # ChallengeTransportError propagates untouched
            ok = await self.recaptcha.verify(cred.recaptcha)
            if not ok:
                logger.info("Login rejected: reCAPTCHA not passed")
                raise PermissionDenied()

        user = await self._lookup(store, realm, cred.username)

        if user is None:
            await self._check_password(cred.password, self.decoy_hash)
            logger.info("Login rejected: bad credentials")
            raise PermissionDenied()

        if not await self._check_password(cred.password, user.password):
            logger.info("Login rejected: bad credentials")
            raise PermissionDenied()

        logger.debug(f"Authenticated user in realm {realm!r}")
        return user

    async def _decode(self, request: RequestBody) -> CredentialPayload:
        body = await request.body()
        if not body:
            logger.info("Login rejected: empty body")
            raise PermissionDenied()

        try:
            return CredentialPayload.model_validate_json(body)
        except ValidationError:
            logger.info("Login rejected: malformed credential payload")

        # Raised outside the except block so no decode context is chained
        raise PermissionDenied()

    async def _lookup(self, store: IdentityStore, realm: str, username: str) -> Optional[Identity]:
        try:
            return await store.get(realm, username)
        except Exception as e:
            logger.debug(f"User lookup failed: {e!r}")
            return None

    async def _check_password(self, password: str, stored_hash: str) -> bool:
        try:
            return await asyncio.to_thread(self.comparator.check, password, stored_hash)
        except Exception:
            logger.exception("Password comparator raised - treating as mismatch")
            return False
