"""
CLI Key Commands

    forge keygen
    forge sign --secret <base58> "<message>"
    forge verify --pubkey <base58> --signature <base64> "<message>"

Secrets are read from --secret or, when omitted, from FORGE_SECRET.
"""

from __future__ import annotations

import logging
import os
from argparse import Namespace

from core.codec.address import decode_address
from core.crypto.keys import generate_keypair
from core.crypto.signatures import (
    decode_signature,
    encode_message,
    encode_signature,
    sign_text,
    verify_signature,
)
from forge_cli.commands.output import (
    EXIT_SUCCESS,
    EXIT_VERIFICATION_FAILED,
    emit,
)


logger = logging.getLogger(__name__)

SECRET_ENV_VAR = "FORGE_SECRET"


def keygen_cmd(args: Namespace) -> int:
    """Generate a keypair and print {pubkey, secret}."""
    keypair = generate_keypair()
    logger.debug(f"Generated keypair {keypair.pubkey}")
    emit({"pubkey": keypair.pubkey, "secret": keypair.secret})
    return EXIT_SUCCESS


def sign_cmd(args: Namespace) -> int:
    """Sign a message and print {signature, public_key, message}."""
    secret = args.secret or os.getenv(SECRET_ENV_VAR, "")
    signed = sign_text(args.message, secret)
    emit({
        "signature": encode_signature(signed.signature),
        "public_key": str(signed.verifying_key),
        "message": args.message,
    })
    return EXIT_SUCCESS


def verify_cmd(args: Namespace) -> int:
    """Verify a signature; exit code 2 when it does not match."""
    payload = encode_message(args.message)
    pubkey = decode_address(args.pubkey, field="pubkey")
    signature = decode_signature(args.signature)

    valid = verify_signature(payload, signature, pubkey)
    emit({"valid": valid, "message": args.message, "pubkey": args.pubkey})
    return EXIT_SUCCESS if valid else EXIT_VERIFICATION_FAILED
