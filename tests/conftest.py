"""
Shared pytest fixtures for Credgate tests.

This module provides common fixtures including:
- reCAPTCHA configurations, enabled and disabled
- A programmable siteverify endpoint
- An identity store holding one user and a recording comparator
"""

import pytest

from credgate.config.provider import ChallengeConfig
from credgate.modules.auth.passwords import hash_password

from helpers import RECAPTCHA_HOST, RECAPTCHA_SECRET, InMemoryIdentityStore, PlainComparator, SiteVerifyMock, User


@pytest.fixture
def siteverify():
    """Create a programmable reCAPTCHA endpoint."""
    return SiteVerifyMock()


@pytest.fixture
def challenge_config():
    """Create an enabled reCAPTCHA configuration."""
    return ChallengeConfig(
        host=RECAPTCHA_HOST,
        key="site-key",
        secret=RECAPTCHA_SECRET,
        timeout=2.0,
    )


@pytest.fixture
def disabled_challenge_config():
    """Create a reCAPTCHA configuration without a secret."""
    return ChallengeConfig(host=RECAPTCHA_HOST, key="site-key", secret="")


@pytest.fixture
def store():
    """Create an identity store holding alice in the root realm."""
    identity_store = InMemoryIdentityStore()
    identity_store.add("/", User(username="alice", password="wonderland"))
    return identity_store


@pytest.fixture
def comparator():
    """Create a recording plaintext comparator."""
    return PlainComparator()


@pytest.fixture(scope="session")
def bcrypt_hash():
    """Hash of 'wonderland' with a low work factor to keep tests fast."""
    return hash_password("wonderland", rounds=4)
