"""Identifier generation and format checks (CUID2)."""

import re

from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()

# Accepted shape for ids coming from clients: CUID2 from this service, or UUIDs
# issued by the identity provider for users. Alphanumeric, hyphen, underscore.
ID_MAX_LENGTH = 64
ID_PATTERN = r"^[a-zA-Z0-9_-]{1," + str(ID_MAX_LENGTH) + r"}$"
_ID_RE = re.compile(ID_PATTERN)


def generate_id() -> str:
    """Generate a collision-resistant unique identifier (CUID2).

    Returns:
        A new CUID string.
    """
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def is_valid_id(value: str | None) -> bool:
    """Return True if value has the accepted identifier shape."""
    if not value:
        return False
    return bool(_ID_RE.fullmatch(value))
