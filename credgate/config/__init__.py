"""Configuration for the credential verifier."""

from .provider import AuthConfig, ChallengeConfig, ConfigProvider, EnvConfigProvider

__all__ = ["AuthConfig", "ChallengeConfig", "ConfigProvider", "EnvConfigProvider"]
