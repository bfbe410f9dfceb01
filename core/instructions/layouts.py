"""
Instruction Layouts

Each supported instruction is described as data: its program, its tag,
its ordered account slots and a borsh CStruct for its data payload. The
builder encodes any layout the same way, so the four operations differ only
in this table.

Binary Contract Notes:
- Account slots are listed in the order the program reads them
- The first struct member is the instruction tag: U32 for the System
  program, U8 for the Token program
- Integers are fixed-width little-endian, no length prefixes
- Option(U8[32]) is a one-byte flag followed by 32 bytes when present
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from borsh_construct import CStruct, Option, U8, U32, U64
from solders.pubkey import Pubkey

from core.instructions.programs import RENT_SYSVAR_ID, SYSTEM_PROGRAM_ID, TOKEN_PROGRAM_ID


TAG_FIELD = "instruction"


class InstructionKind(str, Enum):
    INITIALIZE_MINT = "initialize_mint"
    TRANSFER_NATIVE = "transfer_native"
    TRANSFER_TOKEN = "transfer_token"
    MINT_TO = "mint_to"


class FieldKind(str, Enum):
    U8 = "u8"
    U64 = "u64"
    PUBKEY = "pubkey"
    OPTION_PUBKEY = "option_pubkey"


@dataclass(frozen=True)
class AccountSlot:
    """
    One positional account of an instruction.

    Slots with a fixed address (sysvars) are filled by the builder; all
    others are supplied by the caller under the slot's role name.
    """

    role: str
    is_signer: bool
    is_writable: bool
    fixed: Pubkey | None = None


@dataclass(frozen=True)
class DataField:
    name: str
    kind: FieldKind


@dataclass(frozen=True)
class InstructionLayout:
    kind: InstructionKind
    program_id: Pubkey
    tag: int
    data: CStruct
    accounts: tuple[AccountSlot, ...]
    fields: tuple[DataField, ...]
    # roles that may never be the all-zero address
    nonzero_roles: tuple[str, ...] = ()


# System program instructions are a u32 enum discriminant.
SYSTEM_TRANSFER = 2

# Token program instructions are a u8 discriminant.
TOKEN_INITIALIZE_MINT = 0
TOKEN_TRANSFER = 3
TOKEN_MINT_TO = 7


InitializeMintLayout = CStruct(
    TAG_FIELD / U8,
    "decimals" / U8,
    "mint_authority" / U8[32],
    "freeze_authority" / Option(U8[32]),
)
TransferNativeLayout = CStruct(TAG_FIELD / U32, "lamports" / U64)
TransferTokenLayout = CStruct(TAG_FIELD / U8, "amount" / U64)
MintToLayout = CStruct(TAG_FIELD / U8, "amount" / U64)


LAYOUTS: dict[InstructionKind, InstructionLayout] = {
    InstructionKind.INITIALIZE_MINT: InstructionLayout(
        kind=InstructionKind.INITIALIZE_MINT,
        program_id=TOKEN_PROGRAM_ID,
        tag=TOKEN_INITIALIZE_MINT,
        data=InitializeMintLayout,
        accounts=(
            AccountSlot("mint", is_signer=False, is_writable=True),
            AccountSlot("rent_sysvar", is_signer=False, is_writable=False, fixed=RENT_SYSVAR_ID),
        ),
        fields=(
            DataField("decimals", FieldKind.U8),
            DataField("mint_authority", FieldKind.PUBKEY),
            DataField("freeze_authority", FieldKind.OPTION_PUBKEY),
        ),
    ),
    InstructionKind.TRANSFER_NATIVE: InstructionLayout(
        kind=InstructionKind.TRANSFER_NATIVE,
        program_id=SYSTEM_PROGRAM_ID,
        tag=SYSTEM_TRANSFER,
        data=TransferNativeLayout,
        accounts=(
            AccountSlot("from", is_signer=True, is_writable=True),
            AccountSlot("to", is_signer=False, is_writable=True),
        ),
        fields=(DataField("lamports", FieldKind.U64),),
        nonzero_roles=("from", "to"),
    ),
    InstructionKind.TRANSFER_TOKEN: InstructionLayout(
        kind=InstructionKind.TRANSFER_TOKEN,
        program_id=TOKEN_PROGRAM_ID,
        tag=TOKEN_TRANSFER,
        data=TransferTokenLayout,
        accounts=(
            AccountSlot("source", is_signer=False, is_writable=True),
            AccountSlot("destination", is_signer=False, is_writable=True),
            AccountSlot("owner", is_signer=True, is_writable=False),
        ),
        fields=(DataField("amount", FieldKind.U64),),
        nonzero_roles=("source", "destination"),
    ),
    InstructionKind.MINT_TO: InstructionLayout(
        kind=InstructionKind.MINT_TO,
        program_id=TOKEN_PROGRAM_ID,
        tag=TOKEN_MINT_TO,
        data=MintToLayout,
        accounts=(
            AccountSlot("mint", is_signer=False, is_writable=True),
            AccountSlot("destination", is_signer=False, is_writable=True),
            AccountSlot("authority", is_signer=True, is_writable=False),
        ),
        fields=(DataField("amount", FieldKind.U64),),
        nonzero_roles=("mint", "destination"),
    ),
}


def get_layout(kind: InstructionKind | str) -> InstructionLayout:
    """Look up a layout by kind or kind value (e.g. "mint_to")."""
    return LAYOUTS[InstructionKind(kind)]


__all__ = [
    "TAG_FIELD",
    "InstructionKind",
    "FieldKind",
    "AccountSlot",
    "DataField",
    "InstructionLayout",
    "InitializeMintLayout",
    "TransferNativeLayout",
    "TransferTokenLayout",
    "MintToLayout",
    "LAYOUTS",
    "get_layout",
]
