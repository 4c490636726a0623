"""
Password hashing, token and slug helpers.

Passwords are hashed with PBKDF2-HMAC-SHA256 and stored as
``pbkdf2_sha256$<iterations>$<salt>$<hex digest>``.
"""

import hashlib
import hmac
import re
import secrets
import unicodedata

PASSWORD_ALGORITHM = "pbkdf2_sha256"
PASSWORD_ITERATIONS = 260_000


def hash_password(password: str, iterations: int | None = None) -> str:
    """Hash a clear-text password.

    Args:
        password: Clear-text password
        iterations: PBKDF2 iteration count, defaults to PASSWORD_ITERATIONS

    Returns:
        Encoded hash string
    """
    iterations = iterations or PASSWORD_ITERATIONS
    salt = secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("utf-8"), iterations)
    return f"{PASSWORD_ALGORITHM}${iterations}${salt}${digest.hex()}"


def verify_password(password: str, hashed: str) -> bool:
    """Check a clear-text password against an encoded hash.

    Malformed or foreign hashes never verify.
    """
    try:
        algorithm, iterations, salt, expected = hashed.split("$", 3)
        rounds = int(iterations)
    except (AttributeError, ValueError):
        return False
    if algorithm != PASSWORD_ALGORITHM:
        return False
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("utf-8"), rounds)
    return hmac.compare_digest(digest.hex(), expected)


def generate_token(nbytes: int = 32) -> str:
    """Generate a URL-safe random token."""
    return secrets.token_urlsafe(nbytes)


def tokens_match(expected: str | None, given: str | None) -> bool:
    """Constant-time comparison of two optional tokens."""
    if not expected or not given:
        return False
    return hmac.compare_digest(expected, given)


def slugify(text: str) -> str:
    """Turn ``text`` into a lowercase ASCII slug (``"Café Menu!"`` -> ``"cafe-menu"``)."""
    ascii_text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    return re.sub(r"[^a-z0-9]+", "-", ascii_text.lower()).strip("-")
