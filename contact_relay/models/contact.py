"""
Contact form models.
Every instance lives for a single request and is never persisted.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, List, Mapping


def _render(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(_render(item) for item in value)
    return str(value)


def coerce_field(value: Any) -> str:
    """
    Turn a raw form/JSON value into a string, treating falsy values as empty.

    Lists render comma-joined and whole floats without a fraction, matching
    how browsers stringify the same JSON values.
    """
    if not value:
        return ""
    return _render(value)


class SubmissionInput(BaseModel):
    name: str = ""
    email: str = ""
    company: str = ""
    interest: str = ""
    message: str = ""
    website: str = ""  # Honeypot, hidden from humans
    verification_token: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SubmissionInput":
        """
        Extract and trim the recognized fields from a parsed request body.

        The honeypot is kept untrimmed. The token comes from
        `cf-turnstile-response` (widget default) or `turnstileToken`,
        whichever is non-empty first.
        """
        return cls(
            name=coerce_field(data.get("name")).strip(),
            email=coerce_field(data.get("email")).strip(),
            company=coerce_field(data.get("company")).strip(),
            interest=coerce_field(data.get("interest")).strip(),
            message=coerce_field(data.get("message")).strip(),
            website=coerce_field(data.get("website")),
            verification_token=coerce_field(
                data.get("cf-turnstile-response") or data.get("turnstileToken")
            ).strip(),
        )

    @property
    def is_spam(self) -> bool:
        return bool(self.website)

    def missing_required(self) -> bool:
        return not (self.name and self.email and self.message and self.verification_token)


class VerificationResult(BaseModel):
    """Turnstile siteverify response"""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    success: bool = False
    error_codes: List[str] = Field(default_factory=list, alias="error-codes")

    @field_validator("success", mode="before")
    @classmethod
    def _truthy(cls, value):
        return bool(value)

    @field_validator("error_codes", mode="before")
    @classmethod
    def _as_code_list(cls, value):
        if isinstance(value, str):
            return [value] if value else []
        if isinstance(value, (list, tuple)):
            return [str(code) for code in value]
        return []


class OutboundEmail(BaseModel):
    """Resend send-email payload"""
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(..., alias="from")
    to: str
    reply_to: str
    subject: str
    text: str

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)
