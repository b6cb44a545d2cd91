from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from medtransport.api.deps import get_current_user
from medtransport.db.session import get_session
from medtransport.schemas.auth import AuthUser
from medtransport.schemas.shift import ShiftCreate, ShiftResponse
from medtransport.services.shift_service import ShiftService

router = APIRouter()

@router.post("/{branch_id}/shifts", response_model=ShiftResponse)
async def create_shift(
    branch_id: UUID,
    payload: ShiftCreate,
    current_user: AuthUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_session)
):
    service = ShiftService(session)
    return await service.create_shift(current_user, branch_id, payload)
