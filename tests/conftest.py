"""Root conftest: shared test configuration and fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database (StaticPool, so all
      sessions see the same connection)
    - get_session dependency overridden to use the test database
    - Tokens are minted with the same HS256 secret the API verifies with
"""

import os

# Must be set before the app (and database.py) is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTH_JWT_SECRET"] = "test-secret"
os.environ["AUTH_JWT_AUDIENCE"] = "authenticated"
os.environ.pop("BREVO_API_KEY", None)

import time
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import get_session
from main import app
from models import Admin, Base, Property, Unit

TEST_SECRET = "test-secret"
ADMIN_SUB = "8f8b7a8e-1111-4c1e-9d1e-000000000001"
OTHER_SUB = "8f8b7a8e-2222-4c1e-9d1e-000000000002"


def make_token(sub, email="admin@example.com", secret=TEST_SECRET, audience="authenticated", expires_in=3600):
    claims = {
        "sub": sub,
        "email": email,
        "aud": audience,
        "exp": int(time.time()) + expires_in,
    }
    return jwt.encode(claims, secret, algorithm="HS256")


def auth(sub=ADMIN_SUB, **kwargs):
    return {"Authorization": f"Bearer {make_token(sub, **kwargs)}"}


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    """FastAPI test client with the session dependency overridden."""
    def override_get_session():
        session = session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app.dependency_overrides[get_session] = override_get_session
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def admin(db):
    admin = Admin(user_id=ADMIN_SUB, email="admin@example.com", full_name="Admin Uno")
    db.add(admin)
    db.commit()
    return admin


@pytest.fixture
def other_admin(db):
    other = Admin(user_id=OTHER_SUB, email="other@example.com", full_name="Admin Dos")
    db.add(other)
    db.commit()
    return other


@pytest.fixture
def headers(admin):
    return auth(ADMIN_SUB)


@pytest.fixture
def other_headers(other_admin):
    return auth(OTHER_SUB, email="other@example.com")


def seed_property(db, admin, percentages=(Decimal("60"), Decimal("40")), name="Edificio Norte"):
    """Property with one unit per percentage; units are numbered 1A, 2A, ..."""
    prop = Property(admin_id=admin.id, name=name, street_address="Calle 123", city="Rosario")
    db.add(prop)
    db.flush()
    for i, pct in enumerate(percentages, start=1):
        db.add(Unit(property_id=prop.id, unit_number=f"{i}A", expense_percentage=pct))
    db.commit()
    return prop


@pytest.fixture
def prop(db, admin):
    return seed_property(db, admin)


def unit_ids(db, prop):
    return [
        u.id for u in db.query(Unit).filter(Unit.property_id == prop.id).order_by(Unit.unit_number).all()
    ]
