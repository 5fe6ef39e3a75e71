"""Key derivation and AES-256-GCM sealing for credential envelopes."""

from __future__ import annotations

import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from .utils import IntegrityError, InvalidEnvelopeError

# Stored envelopes depend on every value below; changing any of them makes
# previously sealed credentials unreadable.
KDF_SALT = b"playwright-salt"
KDF_ITERATIONS = 10_000
KEY_LENGTH = 32  # AES-256
NONCE_SIZE = 16
TAG_SIZE = 16
ASSOCIATED_DATA = b"playwright-test"


def derive_key(passphrase: str) -> bytes:
    """Derive 32 bytes of key material from *passphrase* using PBKDF2-HMAC-SHA256.

    The salt is fixed, so the same passphrase always yields the same key.
    """
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=KEY_LENGTH,
        salt=KDF_SALT,
        iterations=KDF_ITERATIONS,
    )
    return kdf.derive(passphrase.encode("utf-8"))


def _check_key(key: bytes) -> None:
    if len(key) != KEY_LENGTH:
        raise ValueError(f"Key material must be {KEY_LENGTH} bytes, got {len(key)}")


def seal(plaintext: bytes, key: bytes) -> tuple[bytes, bytes, bytes]:
    """Encrypt *plaintext* with AES-256-GCM under a fresh random nonce.

    Returns:
        ``(nonce (16), tag (16), ciphertext)`` where the ciphertext has the
        same length as *plaintext*.
    """
    _check_key(key)
    nonce = os.urandom(NONCE_SIZE)
    sealed = AESGCM(key).encrypt(nonce, plaintext, ASSOCIATED_DATA)
    # AESGCM appends the tag; envelopes store it ahead of the ciphertext.
    ciphertext, tag = sealed[:-TAG_SIZE], sealed[-TAG_SIZE:]
    return nonce, tag, ciphertext


def unseal(nonce: bytes, tag: bytes, ciphertext: bytes, key: bytes) -> bytes:
    """Verify and decrypt the parts produced by :func:`seal`.

    Raises:
        InvalidEnvelopeError: If *nonce* or *tag* has the wrong length.
        IntegrityError: On wrong key, tampered or truncated data.
    """
    _check_key(key)
    if len(nonce) != NONCE_SIZE or len(tag) != TAG_SIZE:
        raise InvalidEnvelopeError(
            f"Nonce and tag must be {NONCE_SIZE} and {TAG_SIZE} bytes, "
            f"got {len(nonce)} and {len(tag)}"
        )
    try:
        return AESGCM(key).decrypt(nonce, ciphertext + tag, ASSOCIATED_DATA)
    except InvalidTag as exc:
        raise IntegrityError("Decryption failed (wrong key or tampered data)") from exc
