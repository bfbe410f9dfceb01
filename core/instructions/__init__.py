"""
Core instruction assembly.

Table-driven construction of unsigned System and Token program instructions.
"""
from .builder import (
    build_initialize_mint,
    build_instruction,
    build_mint_to,
    build_transfer_native,
    build_transfer_token,
)
from .layouts import LAYOUTS, InstructionKind, get_layout
from .programs import RENT_SYSVAR_ID, SYSTEM_PROGRAM_ID, TOKEN_PROGRAM_ID
from .types import (
    AccountMeta,
    Instruction,
    instruction_data_base64,
    instruction_to_dict,
)

__all__ = [
    "AccountMeta",
    "Instruction",
    "instruction_data_base64",
    "instruction_to_dict",
    "InstructionKind",
    "LAYOUTS",
    "get_layout",
    "SYSTEM_PROGRAM_ID",
    "TOKEN_PROGRAM_ID",
    "RENT_SYSVAR_ID",
    "build_instruction",
    "build_initialize_mint",
    "build_transfer_native",
    "build_transfer_token",
    "build_mint_to",
]
