from pydantic import BaseModel
from typing import List
from uuid import UUID

from medtransport.db.models import UserRole

class LoginRequest(BaseModel):
    email: str
    password: str

class LoginResponse(BaseModel):
    access_token: str
    token_type: str

class AuthUser(BaseModel):
    """
    The caller of a request. Built fresh from the users and user_branches
    tables on every request so branch assignment changes apply immediately.
    """
    id: UUID
    email: str
    name: str
    role: UserRole
    company_id: UUID
    can_access_all_branches: bool
    branch_ids: List[UUID] = []

class BranchScope(BaseModel):
    branch_ids: List[UUID]
    is_all_branches: bool

class MeResponse(BaseModel):
    user: AuthUser
