"""
Key resolution and the public encrypt/decrypt calls.

Key precedence, evaluated on every call:
    explicit argument > PLAYWRIGHT_ENCRYPTION_KEY > DEFAULT_KEY

Security Note:
    Never log passphrases, key material or plaintext. Only the key *source*
    and envelope sizes are logged.
"""
from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict, field_validator

from .codec import decode_envelope, encode_envelope
from .crypto import derive_key, seal, unseal
from .utils import (
    IntegrityError,
    InvalidEnvelopeError,
    InvalidPlaintextError,
    RoundTripReport,
)

logger = logging.getLogger("credseal")

ENV_VAR = "PLAYWRIGHT_ENCRYPTION_KEY"
# Development-only fallback; real environments set ENV_VAR.
DEFAULT_KEY = "playwright-test-key-change-in-production"


def resolve_key(explicit: str | None = None) -> str:
    """Return the passphrase to use for one seal/unseal operation.

    Empty strings count as "not provided" at both the explicit and the
    environment level.
    """
    if explicit:
        logger.debug("Using explicit encryption key")
        return explicit
    from_env = os.environ.get(ENV_VAR)
    if from_env:
        logger.debug("Using encryption key from %s", ENV_VAR)
        return from_env
    logger.debug("Using built-in development encryption key")
    return DEFAULT_KEY


def encrypt_secret(plaintext: str, explicit_key: str | None = None) -> str:
    """Encrypt *plaintext* and return its base64 envelope.

    Raises:
        InvalidPlaintextError: If *plaintext* cannot be encoded as UTF-8
            (for example it holds lone surrogates).
    """
    try:
        data = plaintext.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidPlaintextError("Plaintext is not encodable as UTF-8 text") from exc
    key = derive_key(resolve_key(explicit_key))
    nonce, tag, ciphertext = seal(data, key)
    envelope = encode_envelope(nonce, tag, ciphertext)
    logger.debug("Sealed %d-byte ciphertext into envelope", len(ciphertext))
    return envelope


def decrypt_secret(envelope: str, explicit_key: str | None = None) -> str:
    """Decrypt an envelope produced by :func:`encrypt_secret`.

    Raises:
        InvalidEnvelopeError: If the envelope is malformed.
        IntegrityError: On wrong key or tampered data.
    """
    nonce, tag, ciphertext = decode_envelope(envelope)
    key = derive_key(resolve_key(explicit_key))
    data = unseal(nonce, tag, ciphertext, key)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise IntegrityError("Decrypted payload is not valid UTF-8 text") from exc


def generate_encrypted_secret(
    plaintext: str, explicit_key: str | None = None
) -> RoundTripReport:
    """Encrypt *plaintext* and verify the envelope decrypts back to it.

    Used when preparing a new envelope for configuration.
    """
    envelope = encrypt_secret(plaintext, explicit_key)
    decrypted = decrypt_secret(envelope, explicit_key)
    report = RoundTripReport(original=plaintext, envelope=envelope, decrypted=decrypted)
    if not report.verified:
        logger.warning("Round-trip verification failed for new envelope")
    return report


class CredentialRecord(BaseModel):
    """A login identifier paired with its encrypted password.

    The password is decrypted on each call to :meth:`password` and is never
    stored on the record.
    """

    identifier: str
    envelope: str

    model_config = ConfigDict(frozen=True)

    @field_validator("envelope")
    @classmethod
    def validate_envelope(cls, v: str) -> str:
        """Reject envelopes that are not well-formed base64 of the right size."""
        try:
            decode_envelope(v)
        except InvalidEnvelopeError as exc:
            raise ValueError(str(exc)) from exc
        return v.strip()

    def password(self, explicit_key: str | None = None) -> str:
        """Decrypt and return the password. The result is not cached."""
        return decrypt_secret(self.envelope, explicit_key)

    @classmethod
    def from_plaintext(
        cls, identifier: str, plaintext: str, explicit_key: str | None = None
    ) -> "CredentialRecord":
        """Build a record by encrypting *plaintext*."""
        return cls(identifier=identifier, envelope=encrypt_secret(plaintext, explicit_key))
