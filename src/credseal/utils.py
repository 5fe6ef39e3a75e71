"""Shared pieces: the exception hierarchy and the round-trip report."""

from __future__ import annotations

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Library-specific exceptions
# ---------------------------------------------------------------------------


class CredentialError(Exception):
    """Base exception for credseal."""


class InvalidEnvelopeError(CredentialError):
    """Raised when an envelope is not valid base64 or is too short."""


class IntegrityError(CredentialError):
    """Raised when tag verification fails (wrong key or tampered data)."""


class KeyResolutionError(CredentialError):
    """Raised when a usable encryption key cannot be determined."""


class InvalidPlaintextError(CredentialError):
    """Raised when a plaintext cannot be encoded as UTF-8."""


# ---------------------------------------------------------------------------
# Round-trip report
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RoundTripReport:
    """Result of ``generate_encrypted_secret``.

    Attributes:
        original: The plaintext that was encrypted.
        envelope: The base64 envelope produced for *original*.
        decrypted: The plaintext recovered by decrypting *envelope*.
    """

    original: str
    envelope: str
    decrypted: str

    @property
    def verified(self) -> bool:
        return self.original == self.decrypted

    def __repr__(self) -> str:
        # Plaintext stays out of reprs and tracebacks.
        return f"RoundTripReport(envelope={self.envelope!r}, verified={self.verified})"
