"""
Instruction Forge HTTP API (FastAPI)

- POST /keypair - Generate an ed25519 keypair
- POST /token/create - InitializeMint instruction
- POST /token/mint - MintTo instruction
- POST /send/sol - Native transfer instruction
- POST /send/token - Token transfer instruction
- POST /message/sign - Sign a message
- POST /message/verify - Verify a signature
- GET /health - Health check

Usage:
    uvicorn api.app:app --reload
"""

__version__ = "0.1.0"
