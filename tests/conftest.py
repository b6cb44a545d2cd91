import os

# Keep the module-level engine off PostgreSQL; tests bind their own engine below
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from medtransport.core.redis import redis_client
from medtransport.core.security import get_password_hash
from medtransport.db.models import (
    Branch, Company, Hospital, MeetingType, Patient, Priority, Shift, User, UserBranch, UserRole
)
from medtransport.db.session import get_session, init_db
from medtransport.main import app
from medtransport.services.auth_service import AuthService

PASSWORD = "Password123!"

# Fixed "now" for dashboard windows: 2024-01-10 15:30 UTC
NOW = datetime(2024, 1, 10, 15, 30, tzinfo=timezone.utc)
TODAY = datetime(2024, 1, 10)


def fixed_clock():
    return NOW


class FakeRedis:
    """In-memory stand-in for the redis.asyncio client used by RedisClient."""

    def __init__(self):
        self.store = {}

    async def set(self, key, value, ex=None):
        self.store[key] = value

    async def get(self, key):
        return self.store.get(key)

    async def delete(self, key):
        self.store.pop(key, None)

    async def aclose(self):
        pass


@pytest.fixture(autouse=True)
def fake_redis(monkeypatch):
    fake = FakeRedis()
    monkeypatch.setattr(redis_client, "redis", fake)
    return fake


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
async def client(session_maker):
    async def override_get_session():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def tenant(session):
    """
    Company "Acme" with branches North and South, plus a second company
    "Rival" with one branch and one hospital of its own.
    """
    acme = Company(name="Acme")
    rival = Company(name="Rival")
    session.add_all([acme, rival])
    await session.flush()

    north = Branch(company_id=acme.id, name="North", address="1 North Ave")
    south = Branch(company_id=acme.id, name="South", address="2 South Ave")
    foreign = Branch(company_id=rival.id, name="Elsewhere", address="9 Far Rd")
    lakeside = Hospital(company_id=acme.id, name="Lakeside Clinic", address="2100 N Lake Shore Dr")
    downtown = Hospital(company_id=acme.id, name="Downtown Imaging", address="77 W Monroe St")
    rival_hospital = Hospital(company_id=rival.id, name="Rival General", address="1 Rival Way")
    session.add_all([north, south, foreign, lakeside, downtown, rival_hospital])
    await session.flush()

    password_hash = get_password_hash(PASSWORD)
    admin = User(company_id=acme.id, email="manager@acme.test", name="Manager",
                 role=UserRole.SUPER_ADMIN, password_hash=password_hash)
    staff = User(company_id=acme.id, email="staff@acme.test", name="Staff",
                 role=UserRole.STAFF, password_hash=password_hash)
    floater = User(company_id=acme.id, email="floater@acme.test", name="Floater",
                   role=UserRole.STAFF, can_access_all_branches=True, password_hash=password_hash)
    outsider = User(company_id=rival.id, email="admin@rival.test", name="Rival Admin",
                    role=UserRole.SUPER_ADMIN, password_hash=password_hash)
    session.add_all([admin, staff, floater, outsider])
    await session.flush()

    session.add(UserBranch(user_id=staff.id, branch_id=north.id))

    north_patient = Patient(branch_id=north.id, first_name="Ada", last_name="Lovelace",
                            gender="F", date_of_birth=datetime(1950, 12, 10))
    south_patient = Patient(branch_id=south.id, first_name="Alan", last_name="Turing",
                            gender="M", date_of_birth=datetime(1952, 6, 23))
    foreign_patient = Patient(branch_id=foreign.id, first_name="Grace", last_name="Hopper",
                              gender="F", date_of_birth=datetime(1946, 12, 9))
    session.add_all([north_patient, south_patient, foreign_patient])
    await session.commit()

    return SimpleNamespace(
        company=acme,
        rival=rival,
        north=north,
        south=south,
        foreign=foreign,
        lakeside=lakeside,
        downtown=downtown,
        rival_hospital=rival_hospital,
        admin=admin,
        staff=staff,
        floater=floater,
        outsider=outsider,
        north_patient=north_patient,
        south_patient=south_patient,
        foreign_patient=foreign_patient,
    )


@pytest.fixture
def auth_user(session):
    async def load(user):
        return await AuthService(session).load_auth_user(user.id, user.company_id)
    return load


@pytest.fixture
def add_shift(session):
    async def add(branch, patient, start, priority=Priority.NORMAL, hospital=None,
                  type=MeetingType.PHYSICAL):
        shift = Shift(
            branch_id=branch.id,
            patient_id=patient.id,
            hospital_id=hospital.id if hospital else None,
            start_time=start,
            end_time=start + timedelta(hours=1),
            type=type,
            priority=priority,
        )
        session.add(shift)
        await session.commit()
        return shift
    return add


@pytest.fixture
def login(client):
    async def do_login(email):
        response = await client.post("/api/v1/auth/login", json={"email": email, "password": PASSWORD})
        assert response.status_code == 200
        return {"Authorization": f"Bearer {response.json()['access_token']}"}
    return do_login
