# tests/conftest.py
"""
Pytest fixtures for the recruitment API.

Each test gets a fresh in-memory SQLite database (foreign keys on), a fast
bcrypt hasher and a token codec with a test secret. The FastAPI dependencies
for all three are overridden so HTTP tests and direct service tests see the
same state.
"""

import os

# Settings are read at import time; keep the test run away from any .env
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.security import (
    HashConfig,
    PasswordHasher,
    TokenClaims,
    TokenCodec,
    TokenConfig,
    get_password_hasher,
    get_token_codec,
)
from app.db.base import Base
from app.db.session import create_db_engine, get_db
from app.main import app
from app.models import Applicant, ApplicantStatus, Company, Position, PositionType, Role, User


# =============================================================================
# Infrastructure
# =============================================================================

@pytest.fixture
def engine():
    test_engine = create_db_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture
def hasher():
    return PasswordHasher(HashConfig(bcrypt_rounds=4))


@pytest.fixture
def codec():
    return TokenCodec(TokenConfig(secret_key="test-secret-key"))


@pytest.fixture
def client(db, hasher, codec):
    def _get_db():
        yield db

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_password_hasher] = lambda: hasher
    app.dependency_overrides[get_token_codec] = lambda: codec
    yield TestClient(app)
    app.dependency_overrides.clear()


# =============================================================================
# Company & User Fixtures
# =============================================================================

@pytest.fixture
def make_company(db):
    def _make(name="Acme", email=None):
        company = Company(
            name=name,
            email=email or f"hello@{name.lower()}.test",
            phone="0800",
            address="-",
        )
        db.add(company)
        db.commit()
        return company

    return _make


@pytest.fixture
def make_user(db, hasher):
    def _make(company, role=Role.ADMIN, email=None, password="secret123", full_name="Test User"):
        user = User(
            company_id=company.id,
            full_name=full_name,
            email=email or f"{role.value.lower()}@{company.name.lower()}.test",
            password=hasher.hash(password),
            role=role,
        )
        db.add(user)
        db.commit()
        return user

    return _make


@pytest.fixture
def make_position(db):
    def _make(company, creator=None, title="Backend Engineer"):
        position = Position(
            company_id=company.id,
            title=title,
            location="Remote",
            type=PositionType.FULL_TIME,
            description="Build APIs",
            salary="Competitive",
            created_by=creator.id if creator else None,
        )
        db.add(position)
        db.commit()
        return position

    return _make


@pytest.fixture
def make_applicant(db):
    def _make(position, full_name="Jane Doe", email="jane@example.com"):
        applicant = Applicant(
            position_id=position.id,
            full_name=full_name,
            email=email,
            phone="1234567890",
            education="BSc Computer Science",
            experience=3,
            resume_url="https://example.com/jane.pdf",
            status=ApplicantStatus.PENDING,
        )
        db.add(applicant)
        db.commit()
        return applicant

    return _make


@pytest.fixture
def auth_headers(codec):
    """Authorization header for a user, signed with the test codec."""

    def _headers(user):
        token = codec.issue(TokenClaims(id=user.id, company_id=user.company_id, role=user.role))
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def company(make_company):
    return make_company("Acme")


@pytest.fixture
def second_company(make_company):
    """A second company for multi-tenant tests."""
    return make_company("Globex")


@pytest.fixture
def admin(make_user, company):
    return make_user(company, Role.ADMIN)


@pytest.fixture
def recruiter(make_user, company):
    return make_user(company, Role.RECRUITER)


@pytest.fixture
def hr(make_user, company):
    return make_user(company, Role.HR)


@pytest.fixture
def other_admin(make_user, second_company):
    return make_user(second_company, Role.ADMIN)
