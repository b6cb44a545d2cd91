from sqlmodel import SQLModel, Field, Relationship
from typing import List, TYPE_CHECKING
from datetime import datetime
from uuid import UUID, uuid4

if TYPE_CHECKING:
    from .branch import Branch
    from .user import User
    from .hospital import Hospital

class Company(SQLModel, table=True):
    __tablename__ = "companies"
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str
    created_at: datetime = Field(default_factory=datetime.utcnow)

    branches: List["Branch"] = Relationship(back_populates="company")
    users: List["User"] = Relationship(back_populates="company")
    hospitals: List["Hospital"] = Relationship(back_populates="company")
