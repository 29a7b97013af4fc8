from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

RiskLevel = Literal["high", "medium", "low"]


class CheckRequest(BaseModel):
    message: StrictStr = Field(
        ...,
        min_length=1,
        description="The text message, email or chat to evaluate.",
    )
    sender: Optional[str] = Field(
        default=None,
        description="Who the message claims to be from. Ignored when blank.",
    )

    @field_validator("sender", mode="before")
    @classmethod
    def _blank_sender_is_missing(cls, value: Any) -> Optional[str]:
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None


class Verdict(BaseModel):
    model_config = ConfigDict(extra="ignore")

    risk: RiskLevel
    summary: StrictStr = Field(min_length=1, description="One sentence summary of the message.")
    reason: StrictStr = Field(min_length=1, description="Short plain-language explanation.")
    advice: StrictStr = Field(min_length=1, description="What the reader should do next.")


class ConfigProbeResponse(BaseModel):
    has_key: bool = Field(serialization_alias="hasKey")


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
