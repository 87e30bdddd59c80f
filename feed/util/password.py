"""Password hashing utilities."""

from passlib.context import CryptContext

_pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a plaintext password with bcrypt."""
    return _pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored hash.

    Malformed or unknown hashes count as a mismatch.
    """
    try:
        return _pwd_context.verify(password, password_hash)
    except ValueError:
        return False
