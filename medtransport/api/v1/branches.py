from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from medtransport.api.deps import get_current_user
from medtransport.db.session import get_session
from medtransport.schemas.auth import AuthUser
from medtransport.schemas.branch import BranchResponse
from medtransport.services.branch_service import BranchService

router = APIRouter()

@router.get("", response_model=List[BranchResponse])
async def read_branches(
    current_user: AuthUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_session)
):
    service = BranchService(session)
    return await service.list_branches(current_user)
