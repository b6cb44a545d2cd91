from sqlmodel import SQLModel, Field, Relationship
from typing import List, TYPE_CHECKING
from datetime import datetime
from uuid import UUID, uuid4

if TYPE_CHECKING:
    from .company import Company
    from .patient import Patient
    from .shift import Shift

class Branch(SQLModel, table=True):
    __tablename__ = "branches"
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    company_id: UUID = Field(foreign_key="companies.id", index=True)
    name: str
    address: str
    created_at: datetime = Field(default_factory=datetime.utcnow)

    company: "Company" = Relationship(back_populates="branches")
    patients: List["Patient"] = Relationship(back_populates="branch")
    shifts: List["Shift"] = Relationship(back_populates="branch")
