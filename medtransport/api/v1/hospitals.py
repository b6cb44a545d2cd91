from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
from uuid import UUID

from medtransport.api.deps import get_current_user
from medtransport.core.exceptions import ForbiddenError
from medtransport.db.models import UserRole
from medtransport.db.session import get_session
from medtransport.schemas.auth import AuthUser
from medtransport.schemas.hospital import HospitalCreate, HospitalDeleted, HospitalResponse, HospitalUpdate
from medtransport.services.hospital_service import HospitalService

router = APIRouter()

async def get_hospital_service(session: AsyncSession = Depends(get_session)) -> HospitalService:
    return HospitalService(session)

def require_manager(current_user: AuthUser = Depends(get_current_user)) -> AuthUser:
    if current_user.role != UserRole.SUPER_ADMIN:
        raise ForbiddenError("Managers only")
    return current_user

@router.get("", response_model=List[HospitalResponse])
async def read_hospitals(
    current_user: AuthUser = Depends(get_current_user),
    service: HospitalService = Depends(get_hospital_service)
):
    return await service.list_hospitals(current_user.company_id)

@router.post("", response_model=HospitalResponse)
async def create_hospital(
    payload: HospitalCreate,
    current_user: AuthUser = Depends(require_manager),
    service: HospitalService = Depends(get_hospital_service)
):
    return await service.create_hospital(current_user.company_id, payload)

@router.patch("/{hospital_id}", response_model=HospitalResponse)
async def update_hospital(
    hospital_id: UUID,
    payload: HospitalUpdate,
    current_user: AuthUser = Depends(require_manager),
    service: HospitalService = Depends(get_hospital_service)
):
    return await service.update_hospital(current_user.company_id, hospital_id, payload)

@router.delete("/{hospital_id}", response_model=HospitalDeleted)
async def delete_hospital(
    hospital_id: UUID,
    current_user: AuthUser = Depends(require_manager),
    service: HospitalService = Depends(get_hospital_service)
):
    await service.delete_hospital(current_user.company_id, hospital_id)
    return HospitalDeleted(ok=True)
