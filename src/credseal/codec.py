"""Envelope codec: ``base64(nonce || tag || ciphertext)``."""

from __future__ import annotations

import base64
import binascii

from .crypto import NONCE_SIZE, TAG_SIZE
from .utils import InvalidEnvelopeError

# ---------------------------------------------------------------------------
# Envelope layout
# ---------------------------------------------------------------------------
# nonce (16)  |  tag (16)  |  ciphertext (N, may be 0)
HEADER_SIZE = NONCE_SIZE + TAG_SIZE  # 32 bytes


def encode_envelope(nonce: bytes, tag: bytes, ciphertext: bytes) -> str:
    """Pack the three sealed parts into one base64 string.

    Raises:
        InvalidEnvelopeError: If *nonce* or *tag* has the wrong length.
    """
    if len(nonce) != NONCE_SIZE:
        raise InvalidEnvelopeError(f"Nonce must be {NONCE_SIZE} bytes, got {len(nonce)}")
    if len(tag) != TAG_SIZE:
        raise InvalidEnvelopeError(f"Tag must be {TAG_SIZE} bytes, got {len(tag)}")
    return base64.b64encode(nonce + tag + ciphertext).decode("ascii")


def decode_envelope(envelope: str) -> tuple[bytes, bytes, bytes]:
    """Split an envelope back into ``(nonce, tag, ciphertext)``.

    Raises:
        InvalidEnvelopeError: If *envelope* is not valid base64 or decodes to
            fewer than 32 bytes.
    """
    try:
        raw = base64.b64decode(envelope.strip(), validate=True)
    except (binascii.Error, ValueError) as exc:
        # ValueError covers non-ASCII characters in a str argument.
        raise InvalidEnvelopeError(f"Envelope is not valid base64: {exc}") from exc
    if len(raw) < HEADER_SIZE:
        raise InvalidEnvelopeError(
            f"Envelope too short ({len(raw)} bytes, minimum {HEADER_SIZE})"
        )
    return raw[:NONCE_SIZE], raw[NONCE_SIZE:HEADER_SIZE], raw[HEADER_SIZE:]
