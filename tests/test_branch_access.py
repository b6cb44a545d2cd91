"""
Unit tests for branch scope resolution and the single-branch guard.
"""

from uuid import uuid4

import pytest

from medtransport.core.exceptions import ForbiddenError, NotFoundError
from medtransport.db.models import UserBranch
from medtransport.services.branch_access import (
    assert_branch_access,
    has_company_wide_access,
    resolve_scope,
)


# ── has_company_wide_access ──────────────────────────────────────────

async def test_company_wide_access_flags(tenant, auth_user):
    assert has_company_wide_access(await auth_user(tenant.admin)) is True
    assert has_company_wide_access(await auth_user(tenant.floater)) is True
    assert has_company_wide_access(await auth_user(tenant.staff)) is False


# ── resolve_scope ────────────────────────────────────────────────────

async def test_admin_scope_is_every_company_branch(session, tenant, auth_user):
    user = await auth_user(tenant.admin)
    # Assignments on the user record play no part for company-wide users
    user.branch_ids = [tenant.foreign.id]

    scope = await resolve_scope(session, user)

    assert scope.is_all_branches is True
    assert set(scope.branch_ids) == {tenant.north.id, tenant.south.id}


async def test_floater_scope_is_every_company_branch(session, tenant, auth_user):
    scope = await resolve_scope(session, await auth_user(tenant.floater))

    assert scope.is_all_branches is True
    assert set(scope.branch_ids) == {tenant.north.id, tenant.south.id}


async def test_staff_scope_is_assigned_branches(session, tenant, auth_user):
    scope = await resolve_scope(session, await auth_user(tenant.staff))

    assert scope.is_all_branches is False
    assert scope.branch_ids == [tenant.north.id]


async def test_staff_scope_is_not_filtered_against_branches(session, tenant, auth_user):
    user = await auth_user(tenant.staff)
    stale = uuid4()
    user.branch_ids = [tenant.north.id, stale]

    scope = await resolve_scope(session, user)

    assert scope.branch_ids == [tenant.north.id, stale]


async def test_staff_without_assignments_has_empty_scope(session, tenant, auth_user):
    user = await auth_user(tenant.staff)
    user.branch_ids = []

    scope = await resolve_scope(session, user)

    assert scope.branch_ids == []
    assert scope.is_all_branches is False


async def test_assignment_changes_show_on_next_load(session, tenant, auth_user):
    session.add(UserBranch(user_id=tenant.staff.id, branch_id=tenant.south.id))
    await session.commit()

    scope = await resolve_scope(session, await auth_user(tenant.staff))

    assert set(scope.branch_ids) == {tenant.north.id, tenant.south.id}


# ── assert_branch_access ─────────────────────────────────────────────

async def test_guard_hides_other_company_branch(session, tenant, auth_user):
    with pytest.raises(NotFoundError) as exc:
        await assert_branch_access(session, await auth_user(tenant.admin), tenant.foreign.id)
    assert exc.value.status_code == 404
    assert exc.value.detail == "Branch not found"


async def test_guard_missing_branch_is_not_found(session, tenant, auth_user):
    with pytest.raises(NotFoundError):
        await assert_branch_access(session, await auth_user(tenant.staff), uuid4())


async def test_guard_rejects_unassigned_staff(session, tenant, auth_user):
    with pytest.raises(ForbiddenError) as exc:
        await assert_branch_access(session, await auth_user(tenant.staff), tenant.south.id)
    assert exc.value.status_code == 403
    assert exc.value.detail == "Not authorized for this branch"


async def test_guard_allows_assigned_staff(session, tenant, auth_user):
    branch = await assert_branch_access(session, await auth_user(tenant.staff), tenant.north.id)
    assert branch.id == tenant.north.id


@pytest.mark.parametrize("who", ["admin", "floater"])
async def test_guard_allows_company_wide_users(session, tenant, auth_user, who):
    user = await auth_user(getattr(tenant, who))
    branch = await assert_branch_access(session, user, tenant.south.id)
    assert branch.id == tenant.south.id
