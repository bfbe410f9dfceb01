"""
API Response Models

Pydantic models for API response serialization. Every endpoint answers with
a ResponseEnvelope: {"success": bool, "data": ... | null, "error": str | null}.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from core.crypto.keys import SigningKeypair
from core.crypto.signatures import SignedMessage, encode_signature
from core.instructions.types import Instruction, instruction_to_dict


DataT = TypeVar("DataT")


class ResponseEnvelope(BaseModel, Generic[DataT]):
    """Uniform success/error wrapper."""

    success: bool = Field(..., description="Whether the operation succeeded")
    data: DataT | None = Field(default=None, description="Result on success")
    error: str | None = Field(default=None, description="Error message on failure")

    @classmethod
    def ok(cls, data: DataT) -> "ResponseEnvelope[DataT]":
        return cls(success=True, data=data, error=None)

    @classmethod
    def fail(cls, error: str) -> "ResponseEnvelope[DataT]":
        return cls(success=False, data=None, error=error)


class HealthResponse(BaseModel):
    """Response for GET /health endpoint."""

    ok: bool = True
    service: str = "instruction-forge-api"
    version: str = "v1"


class KeypairData(BaseModel):
    pubkey: str = Field(..., description="Base-58 verifying key")
    secret: str = Field(..., description="Base-58 of the 64-byte secret key")

    @classmethod
    def from_keypair(cls, keypair: SigningKeypair) -> "KeypairData":
        return cls(pubkey=keypair.pubkey, secret=keypair.secret)


class AccountData(BaseModel):
    pubkey: str
    is_signer: bool
    is_writable: bool


class InstructionData(BaseModel):
    program_id: str = Field(..., description="Base-58 program id")
    accounts: list[AccountData] = Field(..., description="Accounts in program order")
    instruction_data: str = Field(..., description="Base-64 instruction data")

    @classmethod
    def from_instruction(cls, instruction: Instruction) -> "InstructionData":
        return cls.model_validate(instruction_to_dict(instruction))


class SignatureData(BaseModel):
    signature: str = Field(..., description="Base-64 ed25519 signature")
    public_key: str = Field(..., description="Base-58 verifying key")
    message: str = Field(..., description="The signed message")

    @classmethod
    def from_signed(cls, signed: SignedMessage) -> "SignatureData":
        return cls(
            signature=encode_signature(signed.signature),
            public_key=str(signed.verifying_key),
            message=signed.message.decode("utf-8"),
        )


class VerificationData(BaseModel):
    valid: bool
    message: str
    pubkey: str
