from pydantic import BaseModel
from uuid import UUID
from datetime import datetime

class PatientCreate(BaseModel):
    first_name: str
    last_name: str
    gender: str
    date_of_birth: datetime

class PatientResponse(BaseModel):
    id: UUID
    branch_id: UUID
    first_name: str
    last_name: str
    gender: str
    date_of_birth: datetime

    class Config:
        from_attributes = True
