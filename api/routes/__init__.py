"""API route handlers."""

from api.routes import health, keypair, message, send, token

__all__ = ["health", "keypair", "message", "send", "token"]
