"""
Keypair Route

Generate a fresh ed25519 keypair. Nothing is stored; the secret is returned
to the caller once and dropped.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from api.deps import get_logger
from api.models.responses import KeypairData, ResponseEnvelope
from core.crypto.keys import generate_keypair


router = APIRouter(tags=["keys"])


@router.post("/keypair", response_model=ResponseEnvelope[KeypairData])
async def create_keypair(
    log: logging.Logger = Depends(get_logger),
) -> ResponseEnvelope[KeypairData]:
    """Generate a new keypair and return its base-58 pubkey and secret."""
    keypair = generate_keypair()
    log.info(f"Generated keypair {keypair.pubkey}")
    return ResponseEnvelope[KeypairData].ok(KeypairData.from_keypair(keypair))
