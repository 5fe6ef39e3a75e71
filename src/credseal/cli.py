"""Command-line interface for credseal."""

from __future__ import annotations

import argparse
import logging
import sys

from .credentials import ENV_VAR, decrypt_secret, generate_encrypted_secret
from .utils import CredentialError, KeyResolutionError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="credseal",
        description="Encrypt a password into an envelope safe to commit to configuration.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="print diagnostics to stderr"
    )
    parser.add_argument(
        "-k", "--key", default=None, help=f"encryption key (overrides ${ENV_VAR})"
    )
    parser.add_argument(
        "-d", "--decrypt", metavar="ENVELOPE", default=None,
        help="decrypt ENVELOPE instead of encrypting",
    )
    parser.add_argument("plaintext", nargs="?", default=None, help="password to encrypt")
    return parser


def _log(msg: str) -> None:
    print(msg, file=sys.stderr)


def _explicit_key(args: argparse.Namespace) -> str | None:
    if args.key is not None and not args.key:
        raise KeyResolutionError("--key was given an empty value")
    return args.key


def _cmd_encrypt(args: argparse.Namespace) -> None:
    report = generate_encrypted_secret(args.plaintext, _explicit_key(args))

    print("Password Encryption Utility")
    print("===========================")
    print(f"Original: {report.original}")
    print(f"Encrypted: {report.envelope}")
    print(f"Decrypted: {report.decrypted}")
    print(f"Verification: {'SUCCESS' if report.verified else 'FAILED'}")
    if not report.verified:
        _log("credseal: round-trip verification failed")
        sys.exit(1)

    print("\nCopy this envelope into your configuration:")
    print(f"encrypted_password: '{report.envelope}'")
    print("\nSecurity notes:")
    print(f"- Store your encryption key in the {ENV_VAR} environment variable")
    print("- Never commit plain text passwords to version control")
    print("- Use different encryption keys for different environments")


def _cmd_decrypt(args: argparse.Namespace) -> None:
    print(decrypt_secret(args.decrypt, _explicit_key(args)))


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.decrypt is None and not args.plaintext:
        _log("credseal: please provide a password to encrypt")
        parser.print_usage(sys.stderr)
        sys.exit(1)

    try:
        if args.decrypt is not None:
            _cmd_decrypt(args)
        else:
            _cmd_encrypt(args)
    except CredentialError as exc:
        _log(f"credseal: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
