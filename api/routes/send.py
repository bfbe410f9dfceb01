"""
Transfer Routes

Build unsigned transfer instructions:
- POST /send/sol - System program transfer of lamports
- POST /send/token - Token program transfer
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from api.deps import get_logger
from api.models.requests import SendSolRequest, SendTokenRequest
from api.models.responses import InstructionData, ResponseEnvelope
from core.codec.address import decode_address
from core.instructions.builder import build_transfer_native, build_transfer_token


router = APIRouter(prefix="/send", tags=["transfer"])


@router.post("/sol", response_model=ResponseEnvelope[InstructionData])
async def send_sol(
    req: SendSolRequest,
    log: logging.Logger = Depends(get_logger),
) -> ResponseEnvelope[InstructionData]:
    """Build a native transfer instruction."""
    ix = build_transfer_native(
        from_=decode_address(req.from_, field="from"),
        to=decode_address(req.to, field="to"),
        lamports=req.lamports,
    )
    log.info(f"Built transfer_native {req.from_} -> {req.to}")
    return ResponseEnvelope[InstructionData].ok(InstructionData.from_instruction(ix))


@router.post("/token", response_model=ResponseEnvelope[InstructionData])
async def send_token(
    req: SendTokenRequest,
    log: logging.Logger = Depends(get_logger),
) -> ResponseEnvelope[InstructionData]:
    """Build a token transfer instruction."""
    ix = build_transfer_token(
        source=decode_address(req.source, field="source"),
        destination=decode_address(req.destination, field="destination"),
        owner=decode_address(req.owner, field="owner"),
        amount=req.amount,
    )
    log.info(f"Built transfer_token {req.source} -> {req.destination}")
    return ResponseEnvelope[InstructionData].ok(InstructionData.from_instruction(ix))
