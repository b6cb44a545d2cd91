from sqlmodel import SQLModel
from .company import Company
from .branch import Branch
from .user import User, UserRole
from .user_branch import UserBranch
from .hospital import Hospital
from .patient import Patient
from .shift import Shift, MeetingType, Priority

__all__ = [
    "SQLModel",
    "Company",
    "Branch",
    "User",
    "UserRole",
    "UserBranch",
    "Hospital",
    "Patient",
    "Shift",
    "MeetingType",
    "Priority",
]
