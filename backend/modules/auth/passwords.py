"""
Password hashing with bcrypt.
"""

import bcrypt

from .interfaces import IPasswordHasher

# bcrypt only uses the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _encode(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:BCRYPT_MAX_BYTES]


class BcryptPasswordHasher(IPasswordHasher):
    """
    Salted bcrypt hashing with a fixed work factor.

    Every call to ``hash`` draws a new salt, so hashing the same password
    twice gives two different digests that both verify.
    """

    def __init__(self, rounds: int = 10):
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_encode(plaintext), salt).decode("utf-8")

    def verify(self, plaintext: str, digest: str) -> bool:
        try:
            return bcrypt.checkpw(_encode(plaintext), digest.encode("utf-8"))
        except ValueError:
            # Malformed digest
            return False
