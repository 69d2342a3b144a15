"""Token types and payload models for API keys."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TokenType(str, Enum):
    """Supported signed-key types."""

    API_KEY = "api_key"
    PERSONAL_TOKEN = "personal_token"


class TokenPayload(BaseModel):
    """Structure of the data contained within a signed key."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    version: int = Field(default=1, description="Token format version")
    type: TokenType = Field(..., description="Type of key")
    subject: str = Field(..., description="Identifier of the key owner")
    name: str = Field(default="", description="Human-readable key name")
    permissions: List[str] = Field(default_factory=list, description="List of granted permissions")
    issued_at: int = Field(..., description="Unix timestamp when the key was issued")
    expires_at: Optional[int] = Field(None, description="Unix timestamp when the key expires")
    token_id: str = Field(..., description="Unique identifier for the key (for revocation)")
