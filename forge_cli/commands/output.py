"""Shared output helpers for CLI commands."""

from __future__ import annotations

import json
import sys
from typing import Any


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def emit(data: dict[str, Any]) -> None:
    """Write a result object as JSON on stdout."""
    print(json.dumps(data, indent=2))


def fail(message: str, code: int = EXIT_RUNTIME_ERROR) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return code
