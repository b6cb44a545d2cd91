from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jwt.exceptions import PyJWTError
from sqlalchemy.ext.asyncio import AsyncSession

from medtransport.core.config import settings
from medtransport.core.redis import redis_client
from medtransport.core.security import decode_access_token
from medtransport.db.session import get_session
from medtransport.schemas.auth import AuthUser
from medtransport.services.auth_service import AuthService

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_STR}/auth/login")

async def get_current_user(
    token: str = Depends(oauth2_scheme),
    session: AsyncSession = Depends(get_session)
) -> AuthUser:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = decode_access_token(token)
        user_id = UUID(payload.get("sub"))
        company_id = UUID(payload.get("company_id"))
    except (PyJWTError, TypeError, ValueError):
        raise credentials_exception

    # Revoked on logout
    if await redis_client.get_token(token) is None:
        raise credentials_exception

    user = await AuthService(session).load_auth_user(user_id, company_id)
    if user is None:
        raise credentials_exception
    return user
