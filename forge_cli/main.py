"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m forge_cli keygen
    python -m forge_cli sign "<message>" [--secret BASE58]
    python -m forge_cli verify "<message>" --pubkey BASE58 --signature BASE64
    python -m forge_cli build initialize-mint --mint-authority A --mint M --decimals N
    python -m forge_cli build transfer-native --from A --to B --lamports N
    python -m forge_cli build transfer-token --source S --destination D --owner O --amount N
    python -m forge_cli build mint-to --mint M --destination D --authority A --amount N
    python -m forge_cli serve [--host H] [--port P] [--reload]

Environment Variables:
    FORGE_SECRET        Secret used by `sign` when --secret is omitted
    FORGE_LOG_LEVEL     Log level (default: WARNING for the CLI)
    FORGE_HOST          Bind address for `serve`
    FORGE_PORT          Bind port for `serve`
"""

from __future__ import annotations

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from core.config.runtime import load_runtime_config
from core.schemas.errors import ForgeException, InternalError
from forge_cli.commands import build, keys, serve
from forge_cli.commands.output import EXIT_RUNTIME_ERROR, fail


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for the CLI. Logs go to stderr so stdout stays JSON."""
    log_level = getattr(logging, level.upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _add_build_parsers(subparsers: argparse._SubParsersAction) -> None:
    build_parser = subparsers.add_parser(
        "build",
        help="Build an unsigned instruction",
        description="Assemble an instruction and print its program id, accounts and data.",
    )
    build_sub = build_parser.add_subparsers(dest="instruction", help="Instruction to build")

    init_mint = build_sub.add_parser("initialize-mint", help="Token program InitializeMint")
    init_mint.add_argument("--mint-authority", required=True, help="Base-58 mint authority")
    init_mint.add_argument("--mint", required=True, help="Base-58 mint account")
    init_mint.add_argument("--decimals", type=int, required=True, help="Decimals (0-255)")
    freeze = init_mint.add_mutually_exclusive_group()
    freeze.add_argument(
        "--freeze-authority",
        default=None,
        help="Base-58 freeze authority (default: the mint authority)",
    )
    freeze.add_argument(
        "--no-freeze-authority",
        action="store_true",
        default=False,
        help="Create the mint without a freeze authority",
    )
    init_mint.set_defaults(func=build.initialize_mint_cmd)

    native = build_sub.add_parser("transfer-native", help="System program transfer")
    native.add_argument("--from", dest="from_", required=True, help="Base-58 sender")
    native.add_argument("--to", required=True, help="Base-58 recipient")
    native.add_argument("--lamports", type=int, required=True, help="Amount in lamports")
    native.set_defaults(func=build.transfer_native_cmd)

    token = build_sub.add_parser("transfer-token", help="Token program Transfer")
    token.add_argument("--source", required=True, help="Base-58 source token account")
    token.add_argument("--destination", required=True, help="Base-58 destination token account")
    token.add_argument("--owner", required=True, help="Base-58 source account owner")
    token.add_argument("--amount", type=int, required=True, help="Amount in base units")
    token.set_defaults(func=build.transfer_token_cmd)

    mint_to = build_sub.add_parser("mint-to", help="Token program MintTo")
    mint_to.add_argument("--mint", required=True, help="Base-58 mint")
    mint_to.add_argument("--destination", required=True, help="Base-58 destination token account")
    mint_to.add_argument("--authority", required=True, help="Base-58 mint authority")
    mint_to.add_argument("--amount", type=int, required=True, help="Amount in base units")
    mint_to.set_defaults(func=build.mint_to_cmd)

    build_parser.set_defaults(func=lambda args: build_parser.print_help() or EXIT_RUNTIME_ERROR)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="forge",
        description="Instruction Forge CLI - generate keys, sign messages and build unsigned instructions.",
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s 0.1.0"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./forge.json or ~/.config/forge/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print tracebacks for unexpected errors",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- keygen command ---
    keygen_parser = subparsers.add_parser(
        "keygen",
        help="Generate a new ed25519 keypair",
    )
    keygen_parser.set_defaults(func=keys.keygen_cmd)

    # --- sign command ---
    sign_parser = subparsers.add_parser(
        "sign",
        help="Sign a UTF-8 message",
    )
    sign_parser.add_argument("message", type=str, help="Message to sign")
    sign_parser.add_argument(
        "--secret",
        type=str,
        default=None,
        help="Base-58 secret key (default: $FORGE_SECRET)",
    )
    sign_parser.set_defaults(func=keys.sign_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify a message signature",
        description="Exit code 0 when the signature is valid, 2 when it is not.",
    )
    verify_parser.add_argument("message", type=str, help="Message that was signed")
    verify_parser.add_argument("--pubkey", required=True, help="Base-58 verifying key")
    verify_parser.add_argument("--signature", required=True, help="Base-64 signature")
    verify_parser.set_defaults(func=keys.verify_cmd)

    # --- build command ---
    _add_build_parsers(subparsers)

    # --- serve command ---
    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP API",
    )
    serve_parser.add_argument("--host", type=str, default=None, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port")
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        default=False,
        help="Enable auto-reload (development)",
    )
    serve_parser.set_defaults(func=serve.serve_cmd)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    # Load configuration
    try:
        config = load_runtime_config(args.config)
    except (OSError, ValueError, TypeError) as e:
        return fail(f"loading configuration: {e}")

    # The CLI is quiet unless asked; `serve` follows the configured level.
    if args.log_level:
        log_level = args.log_level
    elif args.command == "serve":
        log_level = config.log_level
    else:
        log_level = "WARNING"
    setup_logging(level=log_level)

    args.runtime_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except InternalError as e:
        if args.debug:
            traceback.print_exc()
        return fail(e.message)
    except ForgeException as e:
        return fail(e.message)


if __name__ == "__main__":
    sys.exit(main())
