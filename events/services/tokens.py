"""Opaque token generation for registrations and food tokens."""

import secrets

DEFAULT_TOKEN_BYTES = 16


def generate_token(nbytes: int = DEFAULT_TOKEN_BYTES) -> str:
    """Return a URL-safe random token built from nbytes of CSPRNG output."""
    return secrets.token_urlsafe(nbytes)
