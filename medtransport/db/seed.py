"""
Recreate the demo tenant: ``python -m medtransport.db.seed``.

Wipes every table first, so never point it at a real database.
"""
import asyncio

from sqlmodel import delete

from medtransport.core.logger import logger
from medtransport.core.security import get_password_hash
from medtransport.db.models import Branch, Company, Hospital, Patient, Shift, User, UserBranch, UserRole
from medtransport.db.session import async_session, engine, init_db

DEMO_PASSWORD = "Password123!"

BRANCHES = [
    ("North", "100 North Ave, Chicago, IL 60601"),
    ("South", "200 South Ave, Chicago, IL 60602"),
    ("East", "300 East Ave, Chicago, IL 60603"),
    ("West", "400 West Ave, Chicago, IL 60604"),
    ("Central", "500 Central Ave, Chicago, IL 60605"),
]

HOSPITALS = [
    ("Downtown Imaging & Specialty", "77 W Monroe St, Chicago, IL 60603"),
    ("Lakeside Clinic", "2100 N Lake Shore Dr, Chicago, IL 60614"),
    ("Southside Rehabilitation Center", "6100 S Cottage Grove Ave, Chicago, IL 60637"),
]

async def seed(session):
    # Dependency order
    for model in (Shift, Patient, UserBranch, Hospital, User, Branch, Company):
        await session.execute(delete(model))

    company = Company(name="Acme Medical Transport")
    session.add(company)
    await session.flush()

    branches = [Branch(company_id=company.id, name=name, address=address) for name, address in BRANCHES]
    hospitals = [Hospital(company_id=company.id, name=name, address=address) for name, address in HOSPITALS]
    session.add_all(branches + hospitals)

    password_hash = get_password_hash(DEMO_PASSWORD)
    manager = User(
        company_id=company.id,
        email="manager@acmemedtransport.com",
        name="Manager",
        role=UserRole.SUPER_ADMIN,
        password_hash=password_hash,
    )
    staff = User(
        company_id=company.id,
        email="staff@acmemedtransport.com",
        name="Staff",
        role=UserRole.STAFF,
        password_hash=password_hash,
    )
    session.add_all([manager, staff])
    await session.flush()

    by_name = {b.name: b for b in branches}
    session.add_all([
        UserBranch(user_id=staff.id, branch_id=by_name["Central"].id),
        UserBranch(user_id=staff.id, branch_id=by_name["North"].id),
    ])
    await session.commit()

    logger.info(f"Seeded company {company.id} with {len(branches)} branches and {len(hospitals)} hospitals")
    logger.info(f"Logins: {manager.email} / {staff.email}, password {DEMO_PASSWORD}")
    return company

async def main():
    await init_db()
    async with async_session() as session:
        await seed(session)
    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(main())
