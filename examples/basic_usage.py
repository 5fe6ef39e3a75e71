#!/usr/bin/env python3
"""Basic usage example for credseal.

Demonstrates sealing a password into an envelope, reading it back through a
credential record, and what happens with the wrong key.
"""

from credseal import CredentialRecord, IntegrityError, decrypt_secret, encrypt_secret


def main() -> None:
    # --- Encrypt → envelope ---
    secret = "hunter2"
    envelope = encrypt_secret(secret, "test-key")
    print(f"Envelope: {envelope}")

    # --- Envelope → plaintext ---
    recovered = decrypt_secret(envelope, "test-key")
    assert recovered == secret, "Round-trip failed!"
    print("Round-trip successful!")

    # --- Wrong key ---
    try:
        decrypt_secret(envelope, "wrong-key")
    except IntegrityError as exc:
        print(f"Wrong key rejected: {exc}")

    # --- Credential record (decrypts on access) ---
    operator = CredentialRecord(identifier="qa-op@example.com", envelope=envelope)
    print(f"Record: {operator!r}")
    print(f"Password length: {len(operator.password('test-key'))}")


if __name__ == "__main__":
    main()
