"""
FastAPI Application

Main application setup and configuration.

Usage:
    uvicorn api.app:app --reload

    # Or run directly
    python -m api.app
"""

import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.errors import (
    forge_error_handler,
    generic_error_handler,
    http_error_handler,
    validation_error_handler,
)
from api.routes import health, keypair, message, send, token
from core.config.runtime import RuntimeConfig, get_default_config
from core.schemas.errors import ForgeException


def configure_logging(config: RuntimeConfig) -> None:
    """Configure root logging from FORGE_LOG_LEVEL / forge.json log_level."""
    logging.basicConfig(
        level=config.log_level_value,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def create_app(config: RuntimeConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or get_default_config()
    configure_logging(config)

    app = FastAPI(
        title=config.api.title,
        description="""
Stateless service that builds unsigned ledger instructions and signs messages.

## Endpoints

- **POST /keypair** - Generate an ed25519 keypair
- **POST /token/create** - Token program InitializeMint
- **POST /token/mint** - Token program MintTo
- **POST /send/sol** - System program transfer
- **POST /send/token** - Token program Transfer
- **POST /message/sign** - Sign a UTF-8 message
- **POST /message/verify** - Verify a signature
- **GET /health** - Health check

## Response Format

Every response is `{"success": bool, "data": object | null, "error": string | null}`.
Client errors return 400; unexpected failures return 500 without detail.
Nothing is submitted to a network and nothing is stored.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register exception handlers
    app.add_exception_handler(ForgeException, forge_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(keypair.router)
    app.include_router(token.router)
    app.include_router(send.router)
    app.include_router(message.router)

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    _config = get_default_config()
    uvicorn.run(app, host=_config.server.host, port=_config.server.port)
