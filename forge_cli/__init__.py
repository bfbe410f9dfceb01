"""
Instruction Forge CLI

Command-line interface over the same core used by the HTTP API.

Usage:
    python -m forge_cli keygen
    python -m forge_cli sign --secret <base58> "<message>"
    python -m forge_cli verify --pubkey <base58> --signature <base64> "<message>"
    python -m forge_cli build transfer-native --from <addr> --to <addr> --lamports N
    python -m forge_cli serve
"""

__version__ = "0.1.0"
