"""
CLI Build Commands

    forge build initialize-mint --mint-authority A --mint M --decimals 9 [--freeze-authority F | --no-freeze-authority]
    forge build transfer-native --from A --to B --lamports N
    forge build transfer-token --source S --destination D --owner O --amount N
    forge build mint-to --mint M --destination D --authority A --amount N

Each prints {program_id, accounts, instruction_data}.
"""

from __future__ import annotations

from argparse import Namespace

from core.codec.address import decode_address
from core.instructions.builder import (
    build_initialize_mint,
    build_mint_to,
    build_transfer_native,
    build_transfer_token,
)
from core.instructions.types import instruction_to_dict
from forge_cli.commands.output import EXIT_SUCCESS, emit


def initialize_mint_cmd(args: Namespace) -> int:
    mint_authority = decode_address(args.mint_authority, field="mint-authority")
    if args.no_freeze_authority:
        freeze_authority = None
    elif args.freeze_authority:
        freeze_authority = decode_address(args.freeze_authority, field="freeze-authority")
    else:
        freeze_authority = mint_authority

    ix = build_initialize_mint(
        mint_authority=mint_authority,
        mint=decode_address(args.mint, field="mint"),
        decimals=args.decimals,
        freeze_authority=freeze_authority,
    )
    emit(instruction_to_dict(ix))
    return EXIT_SUCCESS


def transfer_native_cmd(args: Namespace) -> int:
    ix = build_transfer_native(
        from_=decode_address(args.from_, field="from"),
        to=decode_address(args.to, field="to"),
        lamports=args.lamports,
    )
    emit(instruction_to_dict(ix))
    return EXIT_SUCCESS


def transfer_token_cmd(args: Namespace) -> int:
    ix = build_transfer_token(
        source=decode_address(args.source, field="source"),
        destination=decode_address(args.destination, field="destination"),
        owner=decode_address(args.owner, field="owner"),
        amount=args.amount,
    )
    emit(instruction_to_dict(ix))
    return EXIT_SUCCESS


def mint_to_cmd(args: Namespace) -> int:
    ix = build_mint_to(
        mint=decode_address(args.mint, field="mint"),
        destination=decode_address(args.destination, field="destination"),
        authority=decode_address(args.authority, field="authority"),
        amount=args.amount,
    )
    emit(instruction_to_dict(ix))
    return EXIT_SUCCESS
