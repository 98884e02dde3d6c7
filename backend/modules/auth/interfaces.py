"""
Authentication module interfaces.

Other modules should depend on these protocols, not the concrete
implementations. This enables testing with fakes and swapping the
hashing or signing scheme without touching callers.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IPasswordHasher(Protocol):
    """Interface for one-way password hashing."""

    def hash(self, plaintext: str) -> str:
        """
        Hash a password with a fresh random salt.

        Args:
            plaintext: The raw password

        Returns:
            Digest string suitable for storage
        """
        ...

    def verify(self, plaintext: str, digest: str) -> bool:
        """
        Check a password against a stored digest.

        Returns:
            True on match, False otherwise (never raises on mismatch)
        """
        ...


@runtime_checkable
class ITokenService(Protocol):
    """
    Interface for issuing and verifying identity tokens.

    This protocol defines the contract that the auth module exposes
    to the users module and to the API auth gate.
    """

    def issue(self, subject_id: str) -> str:
        """
        Issue a signed, time-limited token for a subject.

        Args:
            subject_id: User ID the token asserts

        Returns:
            Encoded token string

        Raises:
            SigningError: If the token cannot be signed
        """
        ...

    def verify(self, token: str) -> str:
        """
        Verify a token and return its subject.

        Args:
            token: Encoded token string

        Returns:
            The subject (user ID)

        Raises:
            InvalidTokenError: If the token is malformed or badly signed
            ExpiredTokenError: If the token is past its expiry
        """
        ...
