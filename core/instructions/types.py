"""
Instruction Types

An instruction is (program id, ordered account metadata, data bytes),
represented by the solders Instruction and AccountMeta types. Account order
is positional: the receiving program reads accounts by index.

This module adds the JSON form used by the HTTP and CLI front-ends.
"""
from __future__ import annotations

import base64
from typing import Any

from solders.instruction import AccountMeta, Instruction


def instruction_data_base64(instruction: Instruction) -> str:
    """Standard padded base-64 of the data payload."""
    return base64.b64encode(bytes(instruction.data)).decode("ascii")


def account_meta_to_dict(meta: AccountMeta) -> dict[str, Any]:
    return {
        "pubkey": str(meta.pubkey),
        "is_signer": meta.is_signer,
        "is_writable": meta.is_writable,
    }


def instruction_to_dict(instruction: Instruction) -> dict[str, Any]:
    return {
        "program_id": str(instruction.program_id),
        "accounts": [account_meta_to_dict(meta) for meta in instruction.accounts],
        "instruction_data": instruction_data_base64(instruction),
    }


__all__ = [
    "AccountMeta",
    "Instruction",
    "account_meta_to_dict",
    "instruction_data_base64",
    "instruction_to_dict",
]
