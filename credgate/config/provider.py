"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Protocol

DEFAULT_RECAPTCHA_HOST = "https://www.google.com"
DEFAULT_RECAPTCHA_TIMEOUT = 10.0

METHOD_JSON_AUTH = "json"


@dataclass(frozen=True)
class ChallengeConfig:
    """reCAPTCHA configuration. Immutable once loaded."""
    host: str = DEFAULT_RECAPTCHA_HOST
    key: str = ""
    secret: str = field(default="", repr=False)
    timeout: float = DEFAULT_RECAPTCHA_TIMEOUT

    @property
    def is_configured(self) -> bool:
        """Challenge verification is active iff a secret key is set."""
        return bool(self.secret)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ChallengeConfig":
        """Build from the persisted settings shape ``{"host", "key", "secret"}``."""
        return cls(
            host=data.get("host") or DEFAULT_RECAPTCHA_HOST,
            key=data.get("key") or "",
            secret=data.get("secret") or "",
            timeout=float(data.get("timeout") or DEFAULT_RECAPTCHA_TIMEOUT),
        )

    def public_settings(self) -> Dict[str, str]:
        """Settings safe to hand to a login page. Never includes the secret."""
        return {"host": self.host, "key": self.key}


@dataclass
class AuthConfig:
    """Authentication configuration."""
    method: str
    realm: str


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_challenge_config(self) -> ChallengeConfig:
        """Get reCAPTCHA configuration."""
        ...

    def get_auth_config(self) -> AuthConfig:
        """Get authentication configuration."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_challenge_config(self) -> ChallengeConfig:
        """Get reCAPTCHA configuration from environment variables."""
        timeout = os.getenv("RECAPTCHA_TIMEOUT", str(DEFAULT_RECAPTCHA_TIMEOUT))
        try:
            timeout_seconds = float(timeout)
        except ValueError:
            raise ValueError(f"RECAPTCHA_TIMEOUT must be a number of seconds, got {timeout!r}")

        if timeout_seconds <= 0:
            raise ValueError("RECAPTCHA_TIMEOUT must be positive")

        return ChallengeConfig(
            host=os.getenv("RECAPTCHA_HOST") or DEFAULT_RECAPTCHA_HOST,
            key=os.getenv("RECAPTCHA_KEY", ""),
            secret=os.getenv("RECAPTCHA_SECRET", ""),
            timeout=timeout_seconds,
        )

    def get_auth_config(self) -> AuthConfig:
        """Get authentication configuration from environment variables."""
        method = os.getenv("AUTH_METHOD", METHOD_JSON_AUTH).strip().lower()
        if method != METHOD_JSON_AUTH:
            raise ValueError(
                f"Unsupported AUTH_METHOD {method!r}. "
                f"Only {METHOD_JSON_AUTH!r} is available."
            )

        return AuthConfig(
            method=method,
            realm=os.getenv("AUTH_REALM", "/"),
        )
