"""Password intake endpoint.

Receives a password from the web client and records it. No scoring
happens here; the response is a fixed acknowledgement.
"""

from fastapi import APIRouter, Depends, Request

from api.dependencies import get_client_ip, get_rate_limit, limiter
from api.models import PasswordIntakeRequest, PasswordIntakeResponse
from core import log_password_received


router = APIRouter(prefix="/api", tags=["Intake"])

ACK_MESSAGE = "Password received by server"


@router.post("/evaluate", response_model=PasswordIntakeResponse)
@limiter.limit(get_rate_limit)
async def receive_password(
    request: Request,
    payload: PasswordIntakeRequest,
    client_ip: str = Depends(get_client_ip),
):
    """Log a submitted password and acknowledge it."""
    log_password_received(payload.password, source_ip=client_ip)
    return PasswordIntakeResponse(message=ACK_MESSAGE)
