from pydantic import BaseModel
from uuid import UUID

class BranchRef(BaseModel):
    id: UUID
    name: str

    class Config:
        from_attributes = True

class BranchResponse(BranchRef):
    address: str
