from pydantic import BaseModel
from typing import List
from uuid import UUID

from medtransport.db.models import MeetingType, Priority
from medtransport.schemas.branch import BranchResponse
from medtransport.schemas.hospital import HospitalResponse

class MetricsWindow(BaseModel):
    today_start_utc: str
    tomorrow_start_utc: str
    next_7_days_end_utc: str

class MetricsBundle(BaseModel):
    window: MetricsWindow
    patients_total: int
    shifts_total: int
    shifts_today: int
    shifts_next_7_days: int
    urgent_total: int
    urgent_today: int

class ScopeInfo(BaseModel):
    company_id: UUID
    branch_count: int
    is_all_branches: bool

class CompanyOverview(MetricsBundle):
    scope: ScopeInfo
    hospitals_total: int

class BranchOverviewRow(BaseModel):
    branch: BranchResponse
    metrics: MetricsBundle

class BranchesOverview(BaseModel):
    scope: ScopeInfo
    branches: List[BranchOverviewRow]

class TypeCount(BaseModel):
    type: MeetingType
    count: int

class PriorityCount(BaseModel):
    priority: Priority
    count: int

class UpcomingBreakdown(BaseModel):
    by_type: List[TypeCount]
    by_priority: List[PriorityCount]

class BranchBreakdown(BaseModel):
    upcoming_next_7_days: UpcomingBreakdown

class BranchDrilldown(BaseModel):
    branch: BranchResponse
    metrics: MetricsBundle
    breakdown: BranchBreakdown

class TopHospital(BaseModel):
    hospital: HospitalResponse
    count: int
