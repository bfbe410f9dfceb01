"""
API Request Models

Pydantic models for API request validation. Field names follow the wire
format (camelCase where the public API uses it); address fields stay raw
text here and are decoded by the route before reaching the builder.
"""

from pydantic import BaseModel, ConfigDict, Field

from core.instructions.builder import U8_MAX, U64_MAX


class _Request(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class CreateTokenRequest(_Request):
    """Request body for POST /token/create."""

    mint_authority: str = Field(
        ...,
        alias="mintAuthority",
        description="Base-58 mint authority address",
    )
    mint: str = Field(..., description="Base-58 mint account address")
    decimals: int = Field(
        ...,
        strict=True,
        ge=0,
        le=U8_MAX,
        description="Number of base-unit decimals (0-255)",
    )
    freeze_authority: str | None = Field(
        default=None,
        alias="freezeAuthority",
        description="Base-58 freeze authority; defaults to the mint authority",
    )


class SendSolRequest(_Request):
    """Request body for POST /send/sol."""

    from_: str = Field(..., alias="from", description="Base-58 sender address")
    to: str = Field(..., description="Base-58 recipient address")
    lamports: int = Field(
        ...,
        strict=True,
        ge=0,
        le=U64_MAX,
        description="Amount in lamports",
    )


class SendTokenRequest(_Request):
    """Request body for POST /send/token."""

    source: str = Field(..., description="Base-58 source token account")
    destination: str = Field(..., description="Base-58 destination token account")
    owner: str = Field(..., description="Base-58 owner of the source account")
    amount: int = Field(..., strict=True, ge=0, le=U64_MAX)


class MintTokenRequest(_Request):
    """Request body for POST /token/mint."""

    mint: str = Field(..., description="Base-58 mint address")
    destination: str = Field(..., description="Base-58 destination token account")
    authority: str = Field(..., description="Base-58 mint authority")
    amount: int = Field(..., strict=True, ge=0, le=U64_MAX)


class SignMessageRequest(_Request):
    """Request body for POST /message/sign."""

    message: str = Field(..., description="UTF-8 message to sign")
    secret: str = Field(..., description="Base-58 secret key (32 or 64 bytes)")


class VerifyMessageRequest(_Request):
    """Request body for POST /message/verify."""

    message: str = Field(..., description="UTF-8 message that was signed")
    signature: str = Field(..., description="Base-64 ed25519 signature")
    pubkey: str = Field(..., description="Base-58 verifying key")
