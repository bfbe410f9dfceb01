"""Well-known program and sysvar addresses."""
from __future__ import annotations

from solders.pubkey import Pubkey


SYSTEM_PROGRAM_ID = Pubkey.from_string("11111111111111111111111111111111")
TOKEN_PROGRAM_ID = Pubkey.from_string("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")
RENT_SYSVAR_ID = Pubkey.from_string("SysvarRent111111111111111111111111111111111")


__all__ = ["SYSTEM_PROGRAM_ID", "TOKEN_PROGRAM_ID", "RENT_SYSVAR_ID"]
