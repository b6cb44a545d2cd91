from sqlmodel import SQLModel, Field, Relationship
from typing import List, TYPE_CHECKING
from datetime import datetime
from uuid import UUID, uuid4

if TYPE_CHECKING:
    from .company import Company
    from .shift import Shift

class Hospital(SQLModel, table=True):
    __tablename__ = "hospitals"
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    company_id: UUID = Field(foreign_key="companies.id", index=True)
    name: str
    address: str
    created_at: datetime = Field(default_factory=datetime.utcnow)

    company: "Company" = Relationship(back_populates="hospitals")
    shifts: List["Shift"] = Relationship(back_populates="hospital")
