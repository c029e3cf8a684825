"""
Authentication Module - Black Box Interface

Purpose: Verify JSON login credentials, optionally gated by reCAPTCHA
Interface: AuthFactory.build(), AuthenticationService.authenticate()
Hidden: Payload decoding, challenge verification, password comparison

Any identity store and password comparator can be plugged in without
affecting the rest of the service.
"""

from .errors import AuthError, ChallengeTransportError, PermissionDenied
from .factory import AuthFactory
from .json_auth import CredentialPayload, JSONAuth
from .passwords import BcryptComparator, hash_password
from .recaptcha import ReCaptchaVerifier
from .service import AuthResult, AuthenticationService, DefaultAuthenticationService

__all__ = [
    "AuthError",
    "AuthFactory",
    "AuthResult",
    "AuthenticationService",
    "BcryptComparator",
    "ChallengeTransportError",
    "CredentialPayload",
    "DefaultAuthenticationService",
    "JSONAuth",
    "PermissionDenied",
    "ReCaptchaVerifier",
    "hash_password",
]
