"""
Core Schemas
File: __init__.py

Purpose: Export the error taxonomy shared by every core module.
"""

from .errors import (
    ConstructionError,
    ErrorCodes,
    ForgeError,
    ForgeException,
    InternalError,
    InvalidInput,
)


__all__ = [
    "ErrorCodes",
    "ForgeError",
    "ForgeException",
    "InvalidInput",
    "ConstructionError",
    "InternalError",
]
