"""Password tools endpoints.

Public endpoints for password generation and checking.
"""

from fastapi import APIRouter, Request

from api.dependencies import get_rate_limit, limiter
from api.models import (
    PasswordGenerateRequest,
    PasswordGenerateResponse,
    PasswordCheckRequest,
    PasswordCheckResponse,
)
from cli.generator import generate_password
from password_checker import check_password_strength


router = APIRouter(tags=["Password Tools"])


@router.post("/generate", response_model=PasswordGenerateResponse)
@limiter.limit(get_rate_limit)
async def generate_new_password(request: Request, payload: PasswordGenerateRequest):
    """Generate a random password and score it.

    Length bounds are enforced by the request model.
    """
    password = generate_password(length=payload.length)
    result = check_password_strength(password)
    return PasswordGenerateResponse(
        password=password,
        score=result.score,
        strength=result.tier.label,
    )


@router.post("/check", response_model=PasswordCheckResponse)
@limiter.limit(get_rate_limit)
async def check_password(request: Request, payload: PasswordCheckRequest):
    """Check password strength."""
    return check_password_strength(payload.password).to_dict()
