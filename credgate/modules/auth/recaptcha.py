"""
reCAPTCHA verifier implementing the ChallengeVerifier interface.

This module follows Black Box Design principles:
- Implements ChallengeVerifier protocol
- Accepts configuration via dependency injection
- No direct environment variable access
"""

import logging
from typing import Any, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .errors import ChallengeTransportError
from .interfaces import ChallengeVerifier
from ...config.provider import ChallengeConfig

logger = logging.getLogger(__name__)

RECAPTCHA_API = "/recaptcha/api/siteverify"


class SiteVerifyResponse(BaseModel):
    """
    Body returned by the siteverify endpoint.

    Only success decides the outcome. The other fields are kept for logging
    and accept whatever the service sends.
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(False, strict=True)
    hostname: Any = None
    challenge_ts: Any = None
    error_codes: Any = Field(None, alias="error-codes")


# A JSON null body decodes to None, which counts as an unsuccessful answer
_site_verify_body = TypeAdapter(Optional[SiteVerifyResponse])


class ReCaptchaVerifier(ChallengeVerifier):
    """
    Checks reCAPTCHA response tokens against the siteverify API.

    One POST per call, no retries. The request is bounded by the configured
    timeout; expiry is reported as a transport error.
    """

    def __init__(self, config: ChallengeConfig, client: Optional[httpx.AsyncClient] = None):
        """
        Initialize the verifier with injected config.

        Args:
            config: reCAPTCHA configuration (must carry a secret key)
            client: Optional shared HTTP client. A short-lived client is
                created per call when omitted.
        """
        if not config.is_configured:
            raise ValueError("reCAPTCHA secret key is required to verify challenges")

        self.config = config
        self.url = config.host.rstrip("/") + RECAPTCHA_API
        self._client = client

    async def verify(self, response_token: str) -> bool:
        """
        Verify a challenge response token.

        Args:
            response_token: Client-supplied token, may be empty

        Returns:
            True if the service reported success. Non-2xx answers and empty
            tokens are a plain False.

        Raises:
            ChallengeTransportError: Network failure, timeout, or an
                unparseable 2xx body
        """
        if not response_token:
            logger.debug("Empty reCAPTCHA response - not contacting service")
            return False

        form = {"secret": self.config.secret, "response": response_token}

        try:
            if self._client is not None:
                response = await self._client.post(
                    self.url, data=form, timeout=self.config.timeout
                )
            else:
                async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                    response = await client.post(self.url, data=form)
        except httpx.HTTPError as e:
            logger.warning(f"reCAPTCHA service unreachable at {self.url}: {e!r}")
            raise ChallengeTransportError(f"reCAPTCHA verification request failed: {e}") from e

        if not response.is_success:
            logger.info(f"reCAPTCHA service answered HTTP {response.status_code} - treating as failed")
            return False

        try:
            result = _site_verify_body.validate_json(response.content)
        except ValidationError as e:
            logger.warning(f"Malformed reCAPTCHA response (HTTP {response.status_code})")
            raise ChallengeTransportError("reCAPTCHA service returned a malformed response") from e

        if result is None or not result.success:
            error_codes = result.error_codes if result is not None else None
            logger.debug(f"reCAPTCHA rejected token: {error_codes}")
            return False

        return True
