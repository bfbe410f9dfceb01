"""
Token Routes

Build unsigned Token program instructions:
- POST /token/create - InitializeMint
- POST /token/mint - MintTo
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from api.deps import get_logger
from api.models.requests import CreateTokenRequest, MintTokenRequest
from api.models.responses import InstructionData, ResponseEnvelope
from core.codec.address import decode_address
from core.instructions.builder import build_initialize_mint, build_mint_to


router = APIRouter(prefix="/token", tags=["token"])


@router.post("/create", response_model=ResponseEnvelope[InstructionData])
async def create_token(
    req: CreateTokenRequest,
    log: logging.Logger = Depends(get_logger),
) -> ResponseEnvelope[InstructionData]:
    """
    Build an InitializeMint instruction.

    When freezeAuthority is omitted the mint authority is also used as the
    freeze authority.
    """
    mint_authority = decode_address(req.mint_authority, field="mintAuthority")
    mint = decode_address(req.mint, field="mint")
    if req.freeze_authority is None:
        freeze_authority = mint_authority
    else:
        freeze_authority = decode_address(req.freeze_authority, field="freezeAuthority")

    ix = build_initialize_mint(
        mint_authority=mint_authority,
        mint=mint,
        decimals=req.decimals,
        freeze_authority=freeze_authority,
    )
    log.info(f"Built initialize_mint for mint {req.mint}")
    return ResponseEnvelope[InstructionData].ok(InstructionData.from_instruction(ix))


@router.post("/mint", response_model=ResponseEnvelope[InstructionData])
async def mint_token(
    req: MintTokenRequest,
    log: logging.Logger = Depends(get_logger),
) -> ResponseEnvelope[InstructionData]:
    """Build a MintTo instruction."""
    ix = build_mint_to(
        mint=decode_address(req.mint, field="mint"),
        destination=decode_address(req.destination, field="destination"),
        authority=decode_address(req.authority, field="authority"),
        amount=req.amount,
    )
    log.info(f"Built mint_to for mint {req.mint}")
    return ResponseEnvelope[InstructionData].ok(InstructionData.from_instruction(ix))
