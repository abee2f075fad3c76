from fastapi import APIRouter, Depends, Response

from app.schemas.common import SuccessResponse
from app.schemas.user import SessionClaim
from app.services.auth import SessionAuthService, get_auth_service

router = APIRouter()


@router.post("/jwt", response_model=SuccessResponse)
async def issue_token(
    claim: SessionClaim,
    response: Response,
    auth_service: SessionAuthService = Depends(get_auth_service)
):
    """Sign a session token for the given email and set it as a cookie."""
    token = auth_service.create_token(claim.model_dump())
    auth_service.set_session_cookie(response, token)
    return SuccessResponse()


@router.get("/logout", response_model=SuccessResponse)
async def logout(
    response: Response,
    auth_service: SessionAuthService = Depends(get_auth_service)
):
    # Only the cookie is cleared; the token itself stays valid until expiry
    auth_service.clear_session_cookie(response)
    return SuccessResponse()
