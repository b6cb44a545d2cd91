from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from medtransport.core.exceptions import BadRequestError
from medtransport.core.utils import to_naive_utc
from medtransport.db.models import Hospital, MeetingType, Patient, Priority, Shift
from medtransport.schemas.auth import AuthUser
from medtransport.schemas.shift import ShiftCreate
from medtransport.services.branch_access import assert_branch_access

class ShiftService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_shift(self, user: AuthUser, branch_id: UUID, data: ShiftCreate) -> Shift:
        # 1. Caller may write to this branch
        await assert_branch_access(self.session, user, branch_id)

        # 2. Times, stored as naive UTC
        try:
            start_time = to_naive_utc(data.start_time)
            end_time = to_naive_utc(data.end_time)
        except OverflowError:
            raise BadRequestError("start_time and end_time must be valid ISO date strings.")
        if end_time <= start_time:
            raise BadRequestError("end_time must be after start_time.")

        # 3. Patient must belong to this branch
        stmt = select(Patient.id).where(
            Patient.id == data.patient_id,
            Patient.branch_id == branch_id
        )
        result = await self.session.execute(stmt)
        if result.scalars().first() is None:
            raise BadRequestError("Patient not found in this branch.")

        # 4. Hospital comes from the company directory
        if data.hospital_id:
            stmt = select(Hospital.id).where(
                Hospital.id == data.hospital_id,
                Hospital.company_id == user.company_id
            )
            result = await self.session.execute(stmt)
            if result.scalars().first() is None:
                raise BadRequestError("Hospital not found in your company.")

        shift = Shift(
            branch_id=branch_id,
            patient_id=data.patient_id,
            hospital_id=data.hospital_id,
            start_time=start_time,
            end_time=end_time,
            notes=data.notes,
            type=data.type or MeetingType.PHYSICAL,
            priority=data.priority or Priority.NORMAL,
        )
        self.session.add(shift)
        await self.session.commit()
        await self.session.refresh(shift)
        return shift
