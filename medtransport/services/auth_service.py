from datetime import timedelta
from typing import Optional
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from medtransport.core.config import settings
from medtransport.core.logger import logger
from medtransport.core.redis import redis_client
from medtransport.core.security import verify_password, create_access_token
from medtransport.db.models import User, UserBranch
from medtransport.schemas.auth import AuthUser, LoginRequest, LoginResponse

class AuthService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def login(self, login_data: LoginRequest) -> LoginResponse:
        invalid = HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

        # 1. Normalize input
        email = (login_data.email or "").strip().lower()
        password = login_data.password or ""
        if not email or not password:
            raise invalid

        # 2. Find User
        stmt = select(User).where(User.email == email)
        result = await self.session.execute(stmt)
        user = result.scalars().first()

        # 3. Verify Password
        if not user or not verify_password(password, user.password_hash):
            logger.info(f"Failed login for {email}")
            raise invalid

        # 4. Generate Token
        access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        access_token = create_access_token(
            data={
                "sub": str(user.id),
                "company_id": str(user.company_id),
                "role": user.role.value,
            },
            expires_delta=access_token_expires
        )

        # 5. Register the token so logout can revoke it
        await redis_client.set_token(
            access_token,
            {
                "user_id": str(user.id),
                "company_id": str(user.company_id),
                "role": user.role.value,
            },
            settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
        )

        logger.info(f"User {user.id} logged in")
        return LoginResponse(access_token=access_token, token_type="bearer")

    async def logout(self, token: str):
        await redis_client.delete_token(token)
        logger.info("Token revoked")

    async def load_auth_user(self, user_id: UUID, company_id: UUID) -> Optional[AuthUser]:
        """
        Build the request identity from the live user row and its branch
        assignments. Never cached, so unassigning a branch takes effect on the
        caller's next request.
        """
        stmt = select(User).where(User.id == user_id, User.company_id == company_id)
        result = await self.session.execute(stmt)
        user = result.scalars().first()
        if user is None:
            return None

        stmt = select(UserBranch.branch_id).where(UserBranch.user_id == user.id)
        result = await self.session.execute(stmt)
        branch_ids = list(result.scalars().all())

        return AuthUser(
            id=user.id,
            email=user.email,
            name=user.name,
            role=user.role,
            company_id=user.company_id,
            can_access_all_branches=user.can_access_all_branches,
            branch_ids=branch_ids,
        )
