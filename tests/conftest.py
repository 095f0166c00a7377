import os

# Configure before the application modules read the environment
os.environ["JWT_SECRET"] = "test-secret-for-the-suite"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ADMIN_EMAILS"] = "admin@example.com"
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from personal_manager.db.core import Base, get_db
from personal_manager.main import app


@pytest.fixture(scope="function")
def engine():
    """
    In-memory SQLite engine shared by the session fixture and the test client.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine):
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture(scope="function")
def client(engine):
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = Session()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def signin(client, email, name="Test User", password="password123"):
    response = client.post("/auth/signin", json={"name": name, "email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice(client):
    """Auth headers for a freshly registered user"""
    return bearer(signin(client, "alice@example.com", name="Alice")["token"])


@pytest.fixture
def bob(client):
    return bearer(signin(client, "bob@example.com", name="Bob")["token"])


@pytest.fixture
def admin(client):
    return bearer(signin(client, "admin@example.com", name="Admin")["token"])


@pytest.fixture
def wallet(client, alice):
    response = client.post("/accounts", json={"name": "Wallet", "type": "cash", "balance": 100}, headers=alice)
    assert response.status_code == 200, response.text
    return response.json()["data"]


@pytest.fixture
def register(client):
    """Sign a user in (registering on first use) and return the auth response body"""
    def _register(email, name="Test User", password="password123"):
        return signin(client, email, name=name, password=password)
    return _register
