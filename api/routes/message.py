"""
Message Routes

- POST /message/sign - sign a UTF-8 message with a base-58 secret
- POST /message/verify - check a base-64 signature against a pubkey

Message bodies, secrets and signatures are never logged.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from api.deps import get_logger
from api.models.requests import SignMessageRequest, VerifyMessageRequest
from api.models.responses import ResponseEnvelope, SignatureData, VerificationData
from core.codec.address import decode_address
from core.crypto.signatures import (
    decode_signature,
    encode_message,
    sign_text,
    verify_signature,
)


router = APIRouter(prefix="/message", tags=["message"])


@router.post("/sign", response_model=ResponseEnvelope[SignatureData])
async def sign(
    req: SignMessageRequest,
    log: logging.Logger = Depends(get_logger),
) -> ResponseEnvelope[SignatureData]:
    """Sign a message. Empty message or secret is rejected before signing."""
    signed = sign_text(req.message, req.secret)
    log.info(f"Signed message for {signed.verifying_key}")
    return ResponseEnvelope[SignatureData].ok(SignatureData.from_signed(signed))


@router.post("/verify", response_model=ResponseEnvelope[VerificationData])
async def verify(
    req: VerifyMessageRequest,
    log: logging.Logger = Depends(get_logger),
) -> ResponseEnvelope[VerificationData]:
    """Verify a signature. A well-formed but wrong signature yields valid=false."""
    payload = encode_message(req.message)
    pubkey = decode_address(req.pubkey, field="pubkey")
    signature = decode_signature(req.signature)

    valid = verify_signature(payload, signature, pubkey)
    log.info(f"Verified message for {req.pubkey}: valid={valid}")
    return ResponseEnvelope[VerificationData].ok(
        VerificationData(valid=valid, message=req.message, pubkey=req.pubkey)
    )
