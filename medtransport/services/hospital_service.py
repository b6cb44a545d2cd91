from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select, func

from medtransport.core.exceptions import BadRequestError, ConflictError, NotFoundError
from medtransport.db.models import Hospital, Shift
from medtransport.schemas.hospital import HospitalCreate, HospitalUpdate

class HospitalService:
    """The hospital directory is shared by every branch of a company."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get_in_company(self, company_id: UUID, hospital_id: UUID) -> Hospital:
        stmt = select(Hospital).where(
            Hospital.id == hospital_id,
            Hospital.company_id == company_id
        )
        result = await self.session.execute(stmt)
        hospital = result.scalars().first()
        if not hospital:
            raise NotFoundError("hospital not found")
        return hospital

    async def list_hospitals(self, company_id: UUID) -> List[Hospital]:
        stmt = select(Hospital).where(Hospital.company_id == company_id).order_by(Hospital.name)
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def create_hospital(self, company_id: UUID, data: HospitalCreate) -> Hospital:
        name = (data.name or "").strip()
        address = (data.address or "").strip()

        if not name:
            raise BadRequestError("name is required")
        if not address:
            raise BadRequestError("address is required")

        hospital = Hospital(company_id=company_id, name=name, address=address)
        self.session.add(hospital)
        await self.session.commit()
        await self.session.refresh(hospital)
        return hospital

    async def update_hospital(self, company_id: UUID, hospital_id: UUID, data: HospitalUpdate) -> Hospital:
        hospital = await self._get_in_company(company_id, hospital_id)

        if data.name is not None:
            name = data.name.strip()
            if not name:
                raise BadRequestError("name cannot be empty")
            hospital.name = name

        if data.address is not None:
            address = data.address.strip()
            if not address:
                raise BadRequestError("address cannot be empty")
            hospital.address = address

        self.session.add(hospital)
        await self.session.commit()
        await self.session.refresh(hospital)
        return hospital

    async def delete_hospital(self, company_id: UUID, hospital_id: UUID):
        hospital = await self._get_in_company(company_id, hospital_id)

        stmt = select(func.count(Shift.id)).where(Shift.hospital_id == hospital.id)
        result = await self.session.execute(stmt)
        shift_count = result.scalar() or 0

        if shift_count > 0:
            raise ConflictError(
                f"Cannot delete hospital: it is used by {shift_count} shift(s). "
                "Reassign or delete those shifts first."
            )

        await self.session.delete(hospital)
        await self.session.commit()
