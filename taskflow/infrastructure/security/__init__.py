"""Security: bearer token verification."""

from taskflow.infrastructure.security.jwt import verify_token

__all__ = ["verify_token"]
