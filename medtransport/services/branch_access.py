from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from medtransport.core.exceptions import ForbiddenError, NotFoundError
from medtransport.core.logger import logger
from medtransport.db.models import Branch, UserRole
from medtransport.schemas.auth import AuthUser, BranchScope


def has_company_wide_access(user: AuthUser) -> bool:
    """SUPER_ADMINs and floater staff see every branch of their company."""
    return user.role == UserRole.SUPER_ADMIN or user.can_access_all_branches


async def resolve_scope(session: AsyncSession, user: AuthUser) -> BranchScope:
    if has_company_wide_access(user):
        stmt = select(Branch.id).where(Branch.company_id == user.company_id)
        result = await session.execute(stmt)
        return BranchScope(branch_ids=list(result.scalars().all()), is_all_branches=True)

    # Assigned ids were loaded with the user on this request
    return BranchScope(branch_ids=list(user.branch_ids), is_all_branches=False)


async def assert_branch_access(session: AsyncSession, user: AuthUser, branch_id: UUID) -> Branch:
    # A branch of another company reads as missing
    stmt = select(Branch).where(
        Branch.id == branch_id,
        Branch.company_id == user.company_id
    )
    result = await session.execute(stmt)
    branch = result.scalars().first()

    if not branch:
        logger.warning(f"Branch {branch_id} not visible to user {user.id}")
        raise NotFoundError("Branch not found")

    if has_company_wide_access(user):
        return branch

    if branch_id not in user.branch_ids:
        logger.warning(f"User {user.id} is not assigned to branch {branch_id}")
        raise ForbiddenError("Not authorized for this branch")

    return branch
