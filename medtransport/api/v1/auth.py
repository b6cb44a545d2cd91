from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from medtransport.api.deps import get_current_user, oauth2_scheme
from medtransport.db.session import get_session
from medtransport.schemas.auth import AuthUser, LoginRequest, LoginResponse
from medtransport.services.auth_service import AuthService

router = APIRouter()

@router.post("/login", response_model=LoginResponse)
async def login(
    login_data: LoginRequest,
    session: AsyncSession = Depends(get_session)
):
    service = AuthService(session)
    return await service.login(login_data)

@router.post("/logout")
async def logout(
    token: str = Depends(oauth2_scheme),
    current_user: AuthUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_session)
):
    service = AuthService(session)
    await service.logout(token)
    return {"ok": True}
