from sqlmodel import SQLModel, Field
from uuid import UUID

class UserBranch(SQLModel, table=True):
    __tablename__ = "user_branches"
    user_id: UUID = Field(foreign_key="users.id", primary_key=True)
    branch_id: UUID = Field(foreign_key="branches.id", primary_key=True)
