from sqlmodel import SQLModel, Field, Relationship
from typing import List, TYPE_CHECKING
from datetime import datetime
from uuid import UUID, uuid4

if TYPE_CHECKING:
    from .branch import Branch
    from .shift import Shift

class Patient(SQLModel, table=True):
    __tablename__ = "patients"
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    branch_id: UUID = Field(foreign_key="branches.id", index=True)
    first_name: str
    last_name: str
    gender: str
    date_of_birth: datetime
    created_at: datetime = Field(default_factory=datetime.utcnow)

    branch: "Branch" = Relationship(back_populates="patients")
    shifts: List["Shift"] = Relationship(back_populates="patient")
