import os

os.environ.setdefault("JWT_SECRET", "test-secret")  # signing key for the tests
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from pictosigns import models  # noqa: F401  (registers SQLAlchemy models)
from pictosigns.auth.jwt import get_token_service
from pictosigns.auth.passwords import hash_password
from pictosigns.db import Base, get_db
from pictosigns.main import app

# one shared in-memory database per test, every connection sees the same data
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def _get_db():
        yield db

    app.dependency_overrides[get_db] = _get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin(db):
    user = models.User(username="admin", password=hash_password("s3cret!"), is_admin=True)
    db.add(user)
    db.commit()
    return user


@pytest.fixture
def auth_headers(admin):
    token = get_token_service().create_access_token(user_id=admin.id)
    return {"Authorization": f"Bearer {token}"}
