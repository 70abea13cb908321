# learnhub/api/v1/endpoints/auth.py
from fastapi import APIRouter

from learnhub.core.security import create_access_token
from learnhub.schemas.auth import Token, TokenRequest

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/jwt", response_model=Token)
def issue_token(payload: TokenRequest):
    """
    Exchange an identity payload for a signed token valid for one hour.
    The token asserts identity only; roles are looked up per request.
    """
    claims = payload.model_dump(exclude_none=True)
    return Token(token=create_access_token(data=claims))
