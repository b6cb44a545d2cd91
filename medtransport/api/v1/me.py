from fastapi import APIRouter, Depends

from medtransport.api.deps import get_current_user
from medtransport.schemas.auth import AuthUser, MeResponse

router = APIRouter()

@router.get("", response_model=MeResponse)
async def read_me(current_user: AuthUser = Depends(get_current_user)):
    return MeResponse(user=current_user)
