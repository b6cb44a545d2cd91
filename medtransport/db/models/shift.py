from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, TYPE_CHECKING
from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

if TYPE_CHECKING:
    from .branch import Branch
    from .patient import Patient
    from .hospital import Hospital

class MeetingType(str, Enum):
    PHYSICAL = "PHYSICAL"
    VIRTUAL = "VIRTUAL"

class Priority(str, Enum):
    NORMAL = "NORMAL"
    URGENT = "URGENT"

class Shift(SQLModel, table=True):
    """A patient appointment. Times are naive UTC."""
    __tablename__ = "shifts"
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    branch_id: UUID = Field(foreign_key="branches.id", index=True)
    patient_id: UUID = Field(foreign_key="patients.id")
    hospital_id: Optional[UUID] = Field(default=None, foreign_key="hospitals.id")
    start_time: datetime = Field(index=True)
    end_time: datetime
    notes: Optional[str] = None
    type: MeetingType = Field(default=MeetingType.PHYSICAL)
    priority: Priority = Field(default=Priority.NORMAL)
    created_at: datetime = Field(default_factory=datetime.utcnow)

    branch: "Branch" = Relationship(back_populates="shifts")
    patient: "Patient" = Relationship(back_populates="shifts")
    hospital: Optional["Hospital"] = Relationship(back_populates="shifts")
