"""
Credential verifiers used by the session store.

The store only ever calls encode() when an account is created and verify()
at login, so a real hashing scheme can replace PlaintextVerifier without
touching SessionStore.
"""

from abc import ABC, abstractmethod


class CredentialVerifier(ABC):
    @abstractmethod
    def encode(self, secret: str) -> str:
        """Return the form of `secret` that gets stored on the account."""

    @abstractmethod
    def verify(self, secret: str, stored: str) -> bool:
        """Return True if `secret` matches the stored form."""


class PlaintextVerifier(CredentialVerifier):
    """
    Stores and compares secrets verbatim.

    INSECURE: kept only so the demo server behaves like the JavaScript one it
    replaces. Do not deploy with this verifier.
    """

    def encode(self, secret: str) -> str:
        return secret

    def verify(self, secret: str, stored: str) -> bool:
        return secret == stored
