from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from campus_scheduler import config
from campus_scheduler.app import app
from campus_scheduler.core.context import RequestContext
from campus_scheduler.core.database import get_db
from campus_scheduler.models import Base, ProfileModel, UserRole
from campus_scheduler.utils import seed
from campus_scheduler.utils.identity_manager import IdentityManager
from campus_scheduler.utils.profile_manager import ProfileManager


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    monkeypatch.setattr(config, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def seeded(db):
    seed.run(db)
    return db


@pytest.fixture
def make_user(db):
    """Sign up an identity and optionally promote its profile."""

    def _make(email, role=UserRole.STUDENT, name=None, password="secret-pass"):
        metadata = {"name": name} if name is not None else {}
        identity = IdentityManager(db).create_identity(email, password, metadata)
        profile = db.query(ProfileModel).filter(ProfileModel.user_id == identity.id).one()
        if role != UserRole.STUDENT:
            ProfileManager(db).assign_role(profile.id, role)
        return SimpleNamespace(
            identity_id=identity.id,
            profile_id=profile.id,
            email=identity.email,
            password=password,
            ctx=RequestContext.for_identity(identity.id),
        )

    return _make


@pytest.fixture
def admin(make_user):
    return make_user("admin@campus.edu", role=UserRole.ADMIN, name="Ada Admin")


@pytest.fixture
def faculty(make_user):
    return make_user("lee@campus.edu", role=UserRole.FACULTY, name="Dr. Lee")


@pytest.fixture
def student(make_user):
    return make_user("sam@campus.edu", name="Sam Student")
