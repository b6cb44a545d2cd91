from sqlmodel import SQLModel, Field, Relationship
from typing import TYPE_CHECKING
from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

if TYPE_CHECKING:
    from .company import Company

class UserRole(str, Enum):
    SUPER_ADMIN = "SUPER_ADMIN"
    STAFF = "STAFF"

class User(SQLModel, table=True):
    __tablename__ = "users"
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    company_id: UUID = Field(foreign_key="companies.id", index=True)
    email: str = Field(unique=True, index=True)  # stored lower-cased
    name: str
    role: UserRole = Field(default=UserRole.STAFF)
    # Floater staff: company-wide scope without the SUPER_ADMIN role
    can_access_all_branches: bool = Field(default=False)
    password_hash: str
    created_at: datetime = Field(default_factory=datetime.utcnow)

    company: "Company" = Relationship(back_populates="users")
