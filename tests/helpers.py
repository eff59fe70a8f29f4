"""Random-value helpers shared across the verifier tests."""

import secrets
import string
import uuid


def random_secret() -> str:
    """A well-formed secret: ``0x`` followed by 40 hex digits."""
    return f"0x{secrets.token_hex(20)}"


def random_response(length: int = 100) -> str:
    alphabet = string.ascii_letters + string.digits
    return "".join(secrets.choice(alphabet) for _ in range(length))


def random_site_key() -> str:
    return str(uuid.uuid4())
