"""
Adapters: password hashing and token generation.

Passwords are stored as ``pbkdf2_sha256$<iterations>$<salt hex>$<hash hex>``.
Verification is constant-time.
"""

import hashlib
import hmac
import secrets

from postboard.domain.ports import PasswordHasher, TokenGenerator

SCHEME = "pbkdf2_sha256"
SALT_BYTES = 16


class Pbkdf2PasswordHasher(PasswordHasher):
    """PBKDF2-HMAC-SHA256 password hasher with a random salt per hash."""

    def __init__(self, iterations: int = 130_000) -> None:
        self._iterations = iterations

    def hash(self, password: str) -> str:
        salt = secrets.token_hex(SALT_BYTES)
        digest = self._derive(password, salt, self._iterations)
        return f"{SCHEME}${self._iterations}${salt}${digest}"

    def verify(self, password: str, encoded: str) -> bool:
        try:
            scheme, iterations, salt, expected = encoded.split("$", 3)
            actual = self._derive(password, salt, int(iterations))
        except ValueError:
            return False
        if scheme != SCHEME:
            return False
        return hmac.compare_digest(actual, expected)

    @staticmethod
    def _derive(password: str, salt_hex: str, iterations: int) -> str:
        return hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), bytes.fromhex(salt_hex), iterations
        ).hex()


class SecretTokenGenerator(TokenGenerator):
    """Issues random hex tokens from the OS CSPRNG."""

    def __init__(self, nbytes: int = 16) -> None:
        self._nbytes = nbytes

    def generate(self) -> str:
        return secrets.token_hex(self._nbytes)
