import os
import pytest

# Set test environment before importing the app
os.environ['DATABASE_URL'] = 'sqlite://'
os.environ['SECRET_KEY'] = 'test-secret'
os.environ['BCRYPT_ROUNDS'] = '4'
os.environ['FRONTEND_DIR'] = os.path.join(os.path.dirname(__file__), 'no-frontend')

from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from mixtape.db.base import Base
from mixtape.db.session import build_engine, get_db
from mixtape.main import app


@pytest.fixture
def engine(tmp_path):
    """Fresh SQLite file per test, foreign keys on"""
    engine = build_engine(f"sqlite:///{tmp_path / 'test.sqlite'}")
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
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
    """Create a test client bound to the per-test database"""
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
def signup(client):
    """Register through the API and return (user, auth headers)"""
    def _signup(username, password="secret"):
        response = client.post('/api/register', json={'username': username, 'password': password})
        assert response.status_code == 200, response.text
        data = response.json()
        return data['user'], {'Authorization': f"Bearer {data['token']}"}
    return _signup
