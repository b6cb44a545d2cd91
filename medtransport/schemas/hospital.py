from pydantic import BaseModel
from typing import Optional
from uuid import UUID

class HospitalCreate(BaseModel):
    name: Optional[str] = None
    address: Optional[str] = None

class HospitalUpdate(BaseModel):
    name: Optional[str] = None
    address: Optional[str] = None

class HospitalResponse(BaseModel):
    id: UUID
    name: str
    address: str

    class Config:
        from_attributes = True

class HospitalDeleted(BaseModel):
    ok: bool = True
