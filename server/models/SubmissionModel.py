from datetime import datetime, timezone
from pydantic import (
    field_validator,
    StringConstraints,
    ConfigDict,
    BaseModel,
    Field,
)
from email_validator import EmailNotValidError, validate_email
from typing import Optional
from typing_extensions import Annotated

TrimmedText = Annotated[str, StringConstraints(strip_whitespace=True, strict=True)]
RequiredText = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, strict=True)
]


class SubmissionRequest(BaseModel):
    name: RequiredText = Field(..., description="Name is required.")
    email: Annotated[str, StringConstraints(strict=True)] = Field(
        ..., description="Valid email is required."
    )
    subject: Optional[TrimmedText] = Field(
        None, description="Subject line (optional)."
    )
    message: RequiredText = Field(..., description="Message is required.")
    model_config = ConfigDict(extra="forbid")

    @field_validator("email")
    @classmethod
    def email_must_be_valid(cls, value):
        # syntax only: no display names, no padding, no deliverability or
        # special-use domain checks; the address is kept exactly as submitted
        if value != value.strip():
            raise ValueError("Email must not contain surrounding whitespace")
        try:
            result = validate_email(
                value,
                check_deliverability=False,
                globally_deliverable=False,
                allow_display_name=False,
            )
        except EmailNotValidError as e:
            raise ValueError(str(e)) from e
        if "." not in result.ascii_domain:
            raise ValueError("Email domain must have a top-level domain")
        return value


class SubmissionModel(SubmissionRequest):
    createdAt: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation time (UTC).",
    )


class SubmissionResponse(BaseModel):
    id: str = Field(..., alias="_id")
    name: str
    email: str
    subject: Optional[str] = None
    message: str
    createdAt: datetime
    model_config = ConfigDict(populate_by_name=True)

    @field_validator("id", mode="before")
    @classmethod
    def object_id_to_str(cls, value):
        return str(value)


class ContactResponse(BaseModel):
    message: str
    submission: SubmissionResponse
