"""Authentication errors.

Two kinds of failure leave the verifier:

- ``PermissionDenied``: the credential did not yield an identity. It never
  says why (unknown user, wrong password, failed challenge and malformed
  body all look the same to the caller).
- ``ChallengeTransportError``: the reCAPTCHA service could not be reached or
  answered with garbage. Carries its cause so operators can act on it.
"""


class AuthError(Exception):
    """Base class for credential verification errors."""


class PermissionDenied(AuthError):
    """Credential rejected. Deliberately carries no detail."""

    MESSAGE = "permission denied"

    def __init__(self):
        super().__init__(self.MESSAGE)


class ChallengeTransportError(AuthError):
    """The challenge verification service failed at the transport level."""
