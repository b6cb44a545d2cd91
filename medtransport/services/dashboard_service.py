from datetime import datetime
from typing import Callable, List, Optional, Tuple
from uuid import UUID

from sqlalchemy import case
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlmodel import select, func

from medtransport.core.config import settings
from medtransport.core.exceptions import NotFoundError, RangeValidationError
from medtransport.core.logger import logger
from medtransport.core.utils import utcnow, start_of_day_utc, add_days, isoformat_utc
from medtransport.db.models import Branch, Hospital, Patient, Shift, Priority
from medtransport.schemas.auth import AuthUser, BranchScope
from medtransport.schemas.branch import BranchResponse
from medtransport.schemas.dashboard import (
    BranchBreakdown,
    BranchDrilldown,
    BranchOverviewRow,
    BranchesOverview,
    CompanyOverview,
    MetricsBundle,
    MetricsWindow,
    PriorityCount,
    ScopeInfo,
    TopHospital,
    TypeCount,
    UpcomingBreakdown,
)
from medtransport.schemas.hospital import HospitalResponse
from medtransport.services.branch_access import resolve_scope
from medtransport.services.range_validator import validate_range

BRANCH_NOT_FOUND = "Branch not found or not authorized."

# Dispatch-board order: URGENT first, then by start time
URGENT_FIRST = case((Shift.priority == Priority.URGENT, 0), else_=1)


class DashboardService:
    """
    Read-only rollups over shifts for the caller's branch scope.

    All windows are half-open ``[start, end)`` in UTC and are recomputed from
    ``clock`` on every call. Scope is resolved again on every call too.
    """

    def __init__(self, session: AsyncSession, clock: Callable[[], datetime] = utcnow):
        self.session = session
        self.clock = clock

    def _window(self) -> Tuple[datetime, datetime, datetime]:
        today_start = start_of_day_utc(self.clock())
        return today_start, add_days(today_start, 1), add_days(today_start, 7)

    def _require_in_scope(self, scope: BranchScope, branch_id: Optional[UUID]):
        # Same answer as a missing branch, so existence is never confirmed
        if branch_id and branch_id not in scope.branch_ids:
            logger.warning(f"Dashboard request for branch {branch_id} outside caller scope")
            raise NotFoundError(BRANCH_NOT_FOUND)

    def _branch_filter(self, scope: BranchScope, branch_id: Optional[UUID]):
        if branch_id:
            return Shift.branch_id == branch_id
        return Shift.branch_id.in_(scope.branch_ids)

    async def _count(self, model, *conditions) -> int:
        stmt = select(func.count()).select_from(model).where(*conditions)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def _shift_details(self, *conditions, order_by) -> List[Shift]:
        stmt = (
            select(Shift)
            .where(*conditions)
            .options(
                selectinload(Shift.branch),
                selectinload(Shift.patient),
                selectinload(Shift.hospital),
            )
            .order_by(*order_by)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def metrics_for_branches(self, branch_ids: List[UUID]) -> MetricsBundle:
        today_start, tomorrow_start, next7_end = self._window()
        in_branches = Shift.branch_id.in_(branch_ids)
        today = (Shift.start_time >= today_start, Shift.start_time < tomorrow_start)

        patients_total = await self._count(Patient, Patient.branch_id.in_(branch_ids))
        shifts_total = await self._count(Shift, in_branches)
        shifts_today = await self._count(Shift, in_branches, *today)
        shifts_next_7_days = await self._count(
            Shift,
            in_branches,
            Shift.start_time >= today_start,
            Shift.start_time < next7_end
        )
        urgent_total = await self._count(Shift, in_branches, Shift.priority == Priority.URGENT)
        urgent_today = await self._count(Shift, in_branches, Shift.priority == Priority.URGENT, *today)

        return MetricsBundle(
            window=MetricsWindow(
                today_start_utc=isoformat_utc(today_start),
                tomorrow_start_utc=isoformat_utc(tomorrow_start),
                next_7_days_end_utc=isoformat_utc(next7_end),
            ),
            patients_total=patients_total,
            shifts_total=shifts_total,
            shifts_today=shifts_today,
            shifts_next_7_days=shifts_next_7_days,
            urgent_total=urgent_total,
            urgent_today=urgent_today,
        )

    async def get_company_overview(self, user: AuthUser) -> CompanyOverview:
        scope = await resolve_scope(self.session, user)

        hospitals_total = await self._count(Hospital, Hospital.company_id == user.company_id)
        metrics = await self.metrics_for_branches(scope.branch_ids)

        return CompanyOverview(
            scope=ScopeInfo(
                company_id=user.company_id,
                branch_count=len(scope.branch_ids),
                is_all_branches=scope.is_all_branches,
            ),
            hospitals_total=hospitals_total,
            **metrics.model_dump(),
        )

    async def get_branches_overview(self, user: AuthUser) -> BranchesOverview:
        scope = await resolve_scope(self.session, user)

        stmt = select(Branch).where(
            Branch.id.in_(scope.branch_ids),
            Branch.company_id == user.company_id
        ).order_by(Branch.name)
        result = await self.session.execute(stmt)
        branches = result.scalars().all()

        # One AsyncSession cannot run statements concurrently, so the
        # per-branch bundles are computed one after another.
        rows = []
        for branch in branches:
            rows.append(BranchOverviewRow(
                branch=BranchResponse.model_validate(branch),
                metrics=await self.metrics_for_branches([branch.id]),
            ))

        return BranchesOverview(
            scope=ScopeInfo(
                company_id=user.company_id,
                branch_count=len(branches),
                is_all_branches=scope.is_all_branches,
            ),
            branches=rows,
        )

    async def get_branch_drilldown(self, user: AuthUser, branch_id: UUID) -> Optional[BranchDrilldown]:
        """Returns None when the branch is missing or outside the caller's scope."""
        scope = await resolve_scope(self.session, user)
        if branch_id not in scope.branch_ids:
            return None

        stmt = select(Branch).where(
            Branch.id == branch_id,
            Branch.company_id == user.company_id
        )
        result = await self.session.execute(stmt)
        branch = result.scalars().first()
        if not branch:
            return None

        metrics = await self.metrics_for_branches([branch_id])

        today_start, _, next7_end = self._window()
        upcoming = (
            Shift.branch_id == branch_id,
            Shift.start_time >= today_start,
            Shift.start_time < next7_end,
        )

        by_type = await self.session.execute(
            select(Shift.type, func.count(Shift.id)).where(*upcoming).group_by(Shift.type)
        )
        by_priority = await self.session.execute(
            select(Shift.priority, func.count(Shift.id)).where(*upcoming).group_by(Shift.priority)
        )

        return BranchDrilldown(
            branch=BranchResponse.model_validate(branch),
            metrics=metrics,
            breakdown=BranchBreakdown(
                upcoming_next_7_days=UpcomingBreakdown(
                    by_type=[TypeCount(type=t, count=c) for t, c in by_type.all()],
                    by_priority=[PriorityCount(priority=p, count=c) for p, c in by_priority.all()],
                )
            ),
        )

    async def get_today_schedule(self, user: AuthUser, branch_id: Optional[UUID] = None) -> List[Shift]:
        scope = await resolve_scope(self.session, user)
        self._require_in_scope(scope, branch_id)

        today_start, tomorrow_start, _ = self._window()
        return await self._shift_details(
            self._branch_filter(scope, branch_id),
            Shift.start_time >= today_start,
            Shift.start_time < tomorrow_start,
            order_by=(URGENT_FIRST, Shift.start_time),
        )

    async def get_urgent_queue(self, user: AuthUser, branch_id: Optional[UUID] = None) -> List[Shift]:
        scope = await resolve_scope(self.session, user)
        self._require_in_scope(scope, branch_id)

        today_start, _, next7_end = self._window()
        return await self._shift_details(
            self._branch_filter(scope, branch_id),
            Shift.priority == Priority.URGENT,
            Shift.start_time >= today_start,
            Shift.start_time < next7_end,
            order_by=(Shift.start_time,),
        )

    async def get_top_hospitals(self, user: AuthUser, branch_id: Optional[UUID] = None) -> List[TopHospital]:
        scope = await resolve_scope(self.session, user)
        self._require_in_scope(scope, branch_id)

        today_start = start_of_day_utc(self.clock())
        window_end = add_days(today_start, settings.TOP_HOSPITALS_WINDOW_DAYS)

        shift_count = func.count(Shift.id).label("shift_count")
        stmt = (
            select(Shift.hospital_id, shift_count)
            .where(
                self._branch_filter(scope, branch_id),
                Shift.hospital_id.is_not(None),
                Shift.start_time >= today_start,
                Shift.start_time < window_end,
            )
            .group_by(Shift.hospital_id)
            .order_by(shift_count.desc())
            .limit(settings.TOP_HOSPITALS_LIMIT)
        )
        grouped = (await self.session.execute(stmt)).all()
        if not grouped:
            return []

        # Hydrate within the caller's company only
        hospital_ids = [hospital_id for hospital_id, _ in grouped]
        result = await self.session.execute(
            select(Hospital).where(
                Hospital.id.in_(hospital_ids),
                Hospital.company_id == user.company_id
            )
        )
        hospitals = {h.id: h for h in result.scalars().all()}

        ranking = []
        for hospital_id, count in grouped:
            hospital = hospitals.get(hospital_id)
            if hospital:
                summary = HospitalResponse.model_validate(hospital)
            else:
                summary = HospitalResponse(id=hospital_id, name="Unknown", address="")
            ranking.append(TopHospital(hospital=summary, count=count))
        return ranking

    async def get_schedule_range(
        self,
        user: AuthUser,
        from_raw: str,
        to_raw: str,
        branch_id: Optional[UUID] = None
    ) -> List[Shift]:
        scope = await resolve_scope(self.session, user)
        self._require_in_scope(scope, branch_id)

        try:
            from_date, to_date = validate_range(from_raw, to_raw)
        except RangeValidationError as e:
            logger.info(f"Rejected schedule range {from_raw!r} - {to_raw!r}: {e.code.value}")
            raise

        return await self._shift_details(
            self._branch_filter(scope, branch_id),
            Shift.start_time >= from_date,
            Shift.start_time < to_date,
            order_by=(URGENT_FIRST, Shift.start_time),
        )
