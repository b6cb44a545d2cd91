from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
from uuid import UUID

from medtransport.api.deps import get_current_user
from medtransport.db.session import get_session
from medtransport.schemas.auth import AuthUser
from medtransport.schemas.patient import PatientCreate, PatientResponse
from medtransport.services.patient_service import PatientService

router = APIRouter()

async def get_patient_service(session: AsyncSession = Depends(get_session)) -> PatientService:
    return PatientService(session)

@router.get("/{branch_id}/patients", response_model=List[PatientResponse])
async def read_patients(
    branch_id: UUID,
    current_user: AuthUser = Depends(get_current_user),
    service: PatientService = Depends(get_patient_service)
):
    return await service.list_patients(current_user, branch_id)

@router.post("/{branch_id}/patients", response_model=PatientResponse)
async def create_patient(
    branch_id: UUID,
    payload: PatientCreate,
    current_user: AuthUser = Depends(get_current_user),
    service: PatientService = Depends(get_patient_service)
):
    return await service.create_patient(current_user, branch_id, payload)
