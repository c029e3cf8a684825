"""
Authentication Factory following Black Box Design principles.

This factory:
- Constructs the authentication stack based on configuration
- Wires dependencies together
- Returns only the service facade (hiding implementation)
"""

import logging
from typing import Optional

import httpx

from .interfaces import IdentityStore, SecretComparator
from .json_auth import JSONAuth
from .recaptcha import ReCaptchaVerifier
from .service import AuthenticationService, DefaultAuthenticationService
from ...config.provider import METHOD_JSON_AUTH, ConfigProvider

logger = logging.getLogger(__name__)


class AuthFactory:
    """
    Factory for building the authentication stack.

    This is the composition root that:
    - Creates all auth components
    - Wires them together via dependency injection
    - Returns only the public interface
    """

    @staticmethod
    def build(
        config_provider: ConfigProvider,
        identity_store: IdentityStore,
        comparator: Optional[SecretComparator] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> AuthenticationService:
        """
        Build the complete authentication stack.

        Args:
            config_provider: Configuration provider
            identity_store: Store used to look users up
            comparator: Optional password comparator (bcrypt by default)
            http_client: Optional shared client for reCAPTCHA calls

        Returns:
            AuthenticationService facade (hides all implementation details)
        """
        auth_config = config_provider.get_auth_config()
        if auth_config.method != METHOD_JSON_AUTH:
            raise ValueError(f"Unsupported authentication method: {auth_config.method!r}")

        challenge_config = config_provider.get_challenge_config()

        recaptcha = None
        if challenge_config.is_configured:
            logger.info(f"Building JSON authentication with reCAPTCHA ({challenge_config.host})")
            recaptcha = ReCaptchaVerifier(challenge_config, client=http_client)
        else:
            logger.info("Building JSON authentication without reCAPTCHA")

        auther = JSONAuth(recaptcha=recaptcha, comparator=comparator)

        return DefaultAuthenticationService(auther, identity_store, auth_config.realm)
