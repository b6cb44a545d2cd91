from typing import List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from medtransport.db.models import Branch
from medtransport.schemas.auth import AuthUser
from medtransport.services.branch_access import resolve_scope

class BranchService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_branches(self, user: AuthUser) -> List[Branch]:
        scope = await resolve_scope(self.session, user)
        stmt = select(Branch).where(
            Branch.id.in_(scope.branch_ids),
            Branch.company_id == user.company_id
        ).order_by(Branch.name)
        result = await self.session.execute(stmt)
        return result.scalars().all()
