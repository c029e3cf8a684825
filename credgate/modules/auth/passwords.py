"""Password hashing using bcrypt."""

import logging

import bcrypt

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 12


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Hash a plaintext password into a bcrypt string."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


class BcryptComparator:
    """Default SecretComparator backed by bcrypt.checkpw (constant time)."""

    def check(self, secret: str, stored_hash: str) -> bool:
        try:
            return bcrypt.checkpw(secret.encode("utf-8"), stored_hash.encode("utf-8"))
        except (ValueError, TypeError):
            # Malformed hash, or password longer than bcrypt accepts
            logger.debug("bcrypt rejected password or hash format")
            return False
