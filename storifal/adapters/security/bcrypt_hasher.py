"""
bcrypt password hasher adapter - Implements PasswordHasher protocol.

Timing Oracle Prevention:
------------------------
compare() always runs bcrypt. When there is no stored digest (unknown
email, externally authenticated user) the plaintext is checked against a
pre-computed dummy hash, so response time does not reveal whether an
account exists or has a password.
"""

import bcrypt

# bcrypt reads at most 72 bytes of the secret
_BCRYPT_MAX_BYTES = 72


def _secret_bytes(plaintext: str) -> bytes:
    return plaintext.encode()[:_BCRYPT_MAX_BYTES]


class BcryptPasswordHasher:
    """
    Implements PasswordHasher protocol via bcrypt.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, rounds: int = 10) -> None:
        """
        Args:
            rounds: bcrypt cost factor (log2 of the iteration count)
        """
        self._rounds = rounds
        # Same cost factor as real digests
        self._dummy_hash = bcrypt.hashpw(b"dummy_password_for_timing_safety", bcrypt.gensalt(rounds=rounds))

    def hash(self, plaintext: str) -> str:
        return bcrypt.hashpw(_secret_bytes(plaintext), bcrypt.gensalt(rounds=self._rounds)).decode()

    def compare(self, plaintext: str, digest: str | None) -> bool:
        """Constant-time comparison against a bcrypt hash."""
        if not digest:
            bcrypt.checkpw(_secret_bytes(plaintext), self._dummy_hash)
            return False
        try:
            return bcrypt.checkpw(_secret_bytes(plaintext), digest.encode())
        except (ValueError, TypeError):
            return False
