from pydantic import BaseModel
from typing import Optional
from uuid import UUID
from datetime import datetime

from medtransport.db.models import MeetingType, Priority
from medtransport.schemas.branch import BranchRef
from medtransport.schemas.hospital import HospitalResponse
from medtransport.schemas.patient import PatientResponse

class ShiftCreate(BaseModel):
    patient_id: UUID
    start_time: datetime
    end_time: datetime
    notes: Optional[str] = None
    type: Optional[MeetingType] = None
    priority: Optional[Priority] = None
    hospital_id: Optional[UUID] = None

class ShiftResponse(BaseModel):
    id: UUID
    branch_id: UUID
    patient_id: UUID
    hospital_id: Optional[UUID]
    start_time: datetime
    end_time: datetime
    notes: Optional[str]
    type: MeetingType
    priority: Priority

    class Config:
        from_attributes = True

class ShiftDetail(ShiftResponse):
    """A shift joined with what a dispatcher needs on the board."""
    branch: BranchRef
    patient: PatientResponse
    hospital: Optional[HospitalResponse] = None
