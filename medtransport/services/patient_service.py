from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from medtransport.core.exceptions import BadRequestError
from medtransport.core.utils import to_naive_utc
from medtransport.db.models import Patient
from medtransport.schemas.auth import AuthUser
from medtransport.schemas.patient import PatientCreate
from medtransport.services.branch_access import assert_branch_access

class PatientService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_patients(self, user: AuthUser, branch_id: UUID) -> List[Patient]:
        await assert_branch_access(self.session, user, branch_id)

        stmt = select(Patient).where(Patient.branch_id == branch_id).order_by(
            Patient.last_name, Patient.first_name
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def create_patient(self, user: AuthUser, branch_id: UUID, data: PatientCreate) -> Patient:
        await assert_branch_access(self.session, user, branch_id)

        first_name = data.first_name.strip()
        last_name = data.last_name.strip()
        gender = data.gender.strip()
        if not first_name or not last_name or not gender:
            raise BadRequestError("Missing required fields: first_name, last_name, gender, date_of_birth.")
        try:
            date_of_birth = to_naive_utc(data.date_of_birth)
        except OverflowError:
            raise BadRequestError("date_of_birth must be a valid ISO date string.")

        patient = Patient(
            branch_id=branch_id,
            first_name=first_name,
            last_name=last_name,
            gender=gender,
            date_of_birth=date_of_birth,
        )
        self.session.add(patient)
        await self.session.commit()
        await self.session.refresh(patient)
        return patient
