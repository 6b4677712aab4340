"""Pydantic models for API request/response validation.

Defines data structures for all API endpoints.
"""

from pydantic import BaseModel, Field

from core.config import MIN_PASSWORD_LENGTH, MAX_PASSWORD_LENGTH, DEFAULT_PASSWORD_LENGTH


class PasswordIntakeRequest(BaseModel):
    """Request model for the password intake endpoint."""
    password: str = Field(..., description="Password submitted by the client")


class PasswordIntakeResponse(BaseModel):
    """Fixed acknowledgement returned by the intake endpoint."""
    message: str


class PasswordCheckRequest(BaseModel):
    """Request model for password strength check.

    The empty string is accepted and yields the empty-state result.
    """
    password: str = Field(..., description="Password to check")


class StrengthCriteria(BaseModel):
    """The six criteria of a strength check."""
    length: bool
    lowercase: bool
    uppercase: bool
    numbers: bool
    symbols: bool
    no_common: bool


class PasswordCheckResponse(BaseModel):
    """Response model for password check."""
    score: int = Field(..., ge=0, le=100)
    strength: str
    css_class: str
    width: float
    criteria: StrengthCriteria
    suggestions: list[str]


class PasswordGenerateRequest(BaseModel):
    """Request model for password generation."""
    length: int = Field(
        default=DEFAULT_PASSWORD_LENGTH,
        ge=MIN_PASSWORD_LENGTH,
        le=MAX_PASSWORD_LENGTH,
        description="Password length",
    )


class PasswordGenerateResponse(BaseModel):
    """Response model for generated password."""
    password: str
    score: int
    strength: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    version: str
