"""ID and value generators (CUID, short random tokens)."""

import secrets
import string

from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()

_TOKEN_ALPHABET = string.ascii_lowercase + string.digits


def generate_cuid() -> str:
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


def random_token(length: int) -> str:
    """Return a random lowercase base36 token (e.g. 'k3x9qa') of the given length."""
    if length < 1:
        raise ValueError("Token length must be positive")
    return "".join(secrets.choice(_TOKEN_ALPHABET) for _ in range(length))
