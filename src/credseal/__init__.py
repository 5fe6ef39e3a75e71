"""credseal — Tamper-evident encryption for development credentials.

Turns a plaintext password into a base64 envelope
(``nonce || tag || ciphertext``, AES-256-GCM with a PBKDF2-derived key) that
can live in source-controlled configuration, and turns it back on demand.

Example::

    from credseal import decrypt_secret, encrypt_secret

    envelope = encrypt_secret("hunter2", "test-key")
    assert decrypt_secret(envelope, "test-key") == "hunter2"
"""

from .codec import decode_envelope, encode_envelope
from .credentials import (
    DEFAULT_KEY,
    ENV_VAR,
    CredentialRecord,
    decrypt_secret,
    encrypt_secret,
    generate_encrypted_secret,
    resolve_key,
)
from .crypto import derive_key, seal, unseal
from .utils import (
    CredentialError,
    IntegrityError,
    InvalidEnvelopeError,
    InvalidPlaintextError,
    KeyResolutionError,
    RoundTripReport,
)

__all__ = [
    "DEFAULT_KEY",
    "ENV_VAR",
    "CredentialError",
    "CredentialRecord",
    "IntegrityError",
    "InvalidEnvelopeError",
    "InvalidPlaintextError",
    "KeyResolutionError",
    "RoundTripReport",
    "decode_envelope",
    "decrypt_secret",
    "derive_key",
    "encode_envelope",
    "encrypt_secret",
    "generate_encrypted_secret",
    "resolve_key",
    "seal",
    "unseal",
]
