"""
Password hashing utilities using bcrypt.
"""

from passlib.context import CryptContext


class PasswordHasher:
    """Password hashing and verification using bcrypt."""

    def __init__(self, rounds: int = 12):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        """Hash a plain text password."""
        return self._context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a password against a hash.

        Returns:
            True if password matches, False otherwise
        """
        return self._context.verify(plain_password, hashed_password)
