"""
Instruction Builder
Encode instruction layouts into unsigned solders Instructions.

This module provides:
- build_instruction(): generic encoder driven by a layout
- build_initialize_mint / build_transfer_native / build_transfer_token /
  build_mint_to: the four supported operations

Addresses must already be decoded (see core.codec.address). Nothing here
substitutes a default for a missing or invalid value: every such case
raises InvalidInput or ConstructionError.
"""
from __future__ import annotations

from typing import Any, Mapping

from construct import ConstructError
from solders.instruction import AccountMeta, Instruction

from core.codec.address import Address, is_default_address
from core.instructions.layouts import (
    TAG_FIELD,
    FieldKind,
    InstructionKind,
    InstructionLayout,
    LAYOUTS,
)
from core.schemas.errors import ConstructionError, InvalidInput


U8_MAX = 0xFF
U64_MAX = 0xFFFF_FFFF_FFFF_FFFF


def _check_int(name: str, value: Any, maximum: int) -> int:
    # bool is an int subclass; True must not encode as 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"{name} must be an integer", field=name)
    if value < 0 or value > maximum:
        raise InvalidInput(f"{name} must be between 0 and {maximum}", field=name)
    return value


def _check_address(name: str, value: Any) -> Address:
    if not isinstance(value, Address):
        raise InvalidInput(f"{name} must be a decoded address", field=name)
    return value


def _resolve_accounts(
    layout: InstructionLayout,
    accounts: Mapping[str, Address],
) -> list[AccountMeta]:
    metas = []
    for slot in layout.accounts:
        if slot.fixed is not None:
            pubkey = slot.fixed
        else:
            if slot.role not in accounts:
                raise ConstructionError(
                    f"missing account '{slot.role}'", instruction=layout.kind.value
                )
            pubkey = _check_address(slot.role, accounts[slot.role])
            if slot.role in layout.nonzero_roles and is_default_address(pubkey):
                raise InvalidInput(
                    f"{slot.role} must not be the default address", field=slot.role
                )
        metas.append(AccountMeta(pubkey, slot.is_signer, slot.is_writable))
    return metas


def _field_value(name: str, kind: FieldKind, value: Any) -> Any:
    """Check one parameter and convert it to what the borsh layout builds from."""
    if kind is FieldKind.U8:
        return _check_int(name, value, U8_MAX)
    if kind is FieldKind.U64:
        return _check_int(name, value, U64_MAX)
    if kind is FieldKind.PUBKEY:
        return list(bytes(_check_address(name, value)))
    if kind is FieldKind.OPTION_PUBKEY:
        if value is None:
            return None
        return list(bytes(_check_address(name, value)))
    raise ValueError(f"unsupported field kind {kind!r}")


def _encode_data(layout: InstructionLayout, params: Mapping[str, Any]) -> bytes:
    values: dict[str, Any] = {TAG_FIELD: layout.tag}
    for data_field in layout.fields:
        if data_field.name not in params:
            raise ConstructionError(
                f"missing parameter '{data_field.name}'", instruction=layout.kind.value
            )
        try:
            values[data_field.name] = _field_value(
                data_field.name, data_field.kind, params[data_field.name]
            )
        except ValueError as e:
            raise ConstructionError(str(e), instruction=layout.kind.value) from e

    try:
        return layout.data.build(values)
    except ConstructError as e:
        raise ConstructionError(
            f"cannot encode {layout.kind.value}: {e}", instruction=layout.kind.value
        ) from e


def build_instruction(
    kind: InstructionKind | str,
    accounts: Mapping[str, Address],
    params: Mapping[str, Any],
) -> Instruction:
    """
    Build an instruction from its layout.

    Args:
        kind: Which layout to use
        accounts: Decoded addresses keyed by account role
        params: Data field values keyed by field name

    Returns:
        Instruction with accounts in the layout's fixed order

    Raises:
        InvalidInput: Non-address account, out-of-range integer, or a
                      default address where one is not allowed
        ConstructionError: Unknown kind, or a role/parameter missing
    """
    try:
        layout = LAYOUTS[InstructionKind(kind)]
    except ValueError as e:
        raise ConstructionError(f"unknown instruction kind {kind!r}") from e

    metas = _resolve_accounts(layout, accounts)
    data = _encode_data(layout, params)
    return Instruction(layout.program_id, data, metas)


def build_initialize_mint(
    mint_authority: Address,
    mint: Address,
    decimals: int,
    freeze_authority: Address | None,
) -> Instruction:
    """Token program InitializeMint. Pass freeze_authority=None for no freeze authority."""
    return build_instruction(
        InstructionKind.INITIALIZE_MINT,
        accounts={"mint": mint},
        params={
            "decimals": decimals,
            "mint_authority": mint_authority,
            "freeze_authority": freeze_authority,
        },
    )


def build_transfer_native(from_: Address, to: Address, lamports: int) -> Instruction:
    """System program transfer of lamports."""
    return build_instruction(
        InstructionKind.TRANSFER_NATIVE,
        accounts={"from": from_, "to": to},
        params={"lamports": lamports},
    )


def build_transfer_token(
    source: Address,
    destination: Address,
    owner: Address,
    amount: int,
) -> Instruction:
    """Token program Transfer between two token accounts."""
    return build_instruction(
        InstructionKind.TRANSFER_TOKEN,
        accounts={"source": source, "destination": destination, "owner": owner},
        params={"amount": amount},
    )


def build_mint_to(
    mint: Address,
    destination: Address,
    authority: Address,
    amount: int,
) -> Instruction:
    """Token program MintTo."""
    return build_instruction(
        InstructionKind.MINT_TO,
        accounts={"mint": mint, "destination": destination, "authority": authority},
        params={"amount": amount},
    )


__all__ = [
    "U8_MAX",
    "U64_MAX",
    "build_instruction",
    "build_initialize_mint",
    "build_transfer_native",
    "build_transfer_token",
    "build_mint_to",
]
