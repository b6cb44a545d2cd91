from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
from uuid import UUID

from medtransport.api.deps import get_current_user
from medtransport.core.config import settings
from medtransport.core.exceptions import NotFoundError, RangeErrorCode, RangeValidationError
from medtransport.db.session import get_session
from medtransport.schemas.auth import AuthUser
from medtransport.schemas.dashboard import BranchDrilldown, BranchesOverview, CompanyOverview, TopHospital
from medtransport.schemas.shift import ShiftDetail
from medtransport.services.dashboard_service import BRANCH_NOT_FOUND, DashboardService

router = APIRouter()

RANGE_ERROR_MESSAGES = {
    RangeErrorCode.INVALID_FROM: "from must be a valid ISO date string.",
    RangeErrorCode.INVALID_TO: "to must be a valid ISO date string.",
    RangeErrorCode.INVALID_RANGE: "to must be after from.",
    RangeErrorCode.RANGE_TOO_LARGE: f"Range too large. Max is {settings.SCHEDULE_RANGE_MAX_DAYS} days.",
}

def parse_branch_id(raw: Optional[str]) -> Optional[UUID]:
    """
    Blank means no filter. A value that is not a UUID cannot name a branch
    in scope, so it gets the same 404 as an out-of-scope branch.
    """
    if raw is None or not raw.strip():
        return None
    try:
        return UUID(raw.strip())
    except ValueError:
        raise NotFoundError(BRANCH_NOT_FOUND)

async def get_dashboard_service(session: AsyncSession = Depends(get_session)) -> DashboardService:
    return DashboardService(session)

@router.get("", response_model=CompanyOverview)
async def company_overview(
    current_user: AuthUser = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service)
):
    return await service.get_company_overview(current_user)

@router.get("/branches", response_model=BranchesOverview)
async def branches_overview(
    current_user: AuthUser = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service)
):
    return await service.get_branches_overview(current_user)

@router.get("/branches/{branch_id}", response_model=BranchDrilldown)
async def branch_drilldown(
    branch_id: str,
    current_user: AuthUser = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service)
):
    branch_uuid = parse_branch_id(branch_id)
    result = await service.get_branch_drilldown(current_user, branch_uuid) if branch_uuid else None
    if result is None:
        raise NotFoundError(BRANCH_NOT_FOUND)
    return result

@router.get("/schedule/today", response_model=List[ShiftDetail])
async def today_schedule(
    branch_id: Optional[str] = None,
    current_user: AuthUser = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service)
):
    return await service.get_today_schedule(current_user, parse_branch_id(branch_id))

@router.get("/queue/urgent", response_model=List[ShiftDetail])
async def urgent_queue(
    branch_id: Optional[str] = None,
    current_user: AuthUser = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service)
):
    return await service.get_urgent_queue(current_user, parse_branch_id(branch_id))

@router.get("/top/hospitals", response_model=List[TopHospital])
async def top_hospitals(
    branch_id: Optional[str] = None,
    current_user: AuthUser = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service)
):
    return await service.get_top_hospitals(current_user, parse_branch_id(branch_id))

@router.get("/schedule/range", response_model=List[ShiftDetail])
async def schedule_range(
    from_: Optional[str] = Query(None, alias="from"),
    to: Optional[str] = None,
    branch_id: Optional[str] = None,
    current_user: AuthUser = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service)
):
    if not (from_ or "").strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="from is required (ISO date string).")
    if not (to or "").strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="to is required (ISO date string).")

    try:
        return await service.get_schedule_range(current_user, from_, to, parse_branch_id(branch_id))
    except RangeValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=RANGE_ERROR_MESSAGES[e.code])
