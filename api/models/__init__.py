"""API request and response models."""

from api.models.requests import (
    CreateTokenRequest,
    MintTokenRequest,
    SendSolRequest,
    SendTokenRequest,
    SignMessageRequest,
    VerifyMessageRequest,
)
from api.models.responses import (
    AccountData,
    HealthResponse,
    InstructionData,
    KeypairData,
    ResponseEnvelope,
    SignatureData,
    VerificationData,
)

__all__ = [
    "CreateTokenRequest",
    "MintTokenRequest",
    "SendSolRequest",
    "SendTokenRequest",
    "SignMessageRequest",
    "VerifyMessageRequest",
    "AccountData",
    "HealthResponse",
    "InstructionData",
    "KeypairData",
    "ResponseEnvelope",
    "SignatureData",
    "VerificationData",
]
