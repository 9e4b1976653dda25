import os
import sys
import tempfile
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker


# Ensure `import backend.app...` works regardless of where pytest is run from.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Must be set before anything imports backend.app.config.
os.environ["DISABLE_DOTENV"] = "1"
os.environ.setdefault("DATABASE_URL", f"sqlite+pysqlite:///{tempfile.mkdtemp()}/boot.sqlite3")
os.environ["EXTRA_BCRYPT_STRING"] = "test-pepper"
os.environ["JWT_SECRET"] = "test-jwt-secret"
# Lowest bcrypt cost keeps the suite fast.
os.environ["BCRYPT_ROUNDS"] = "4"

JOB_ID = "507f1f77bcf86cd799439011"


@pytest.fixture(scope="session")
def test_db_path(tmp_path_factory: pytest.TempPathFactory) -> Path:
    return tmp_path_factory.mktemp("db") / "test.sqlite3"


@pytest.fixture()
def app(test_db_path: Path, monkeypatch: pytest.MonkeyPatch) -> FastAPI:
    """
    The real application wired to a temporary SQLite DB.

    Startup hooks are not run (the client is not used as a context manager); the
    fixture creates the tables itself.
    """
    from backend.app import config
    from backend.app import database as db

    # Another test module may have imported config before the env above was applied.
    monkeypatch.setattr(config, "EXTRA_BCRYPT_STRING", "test-pepper")
    monkeypatch.setattr(config, "JWT_SECRET", "test-jwt-secret")
    monkeypatch.setattr(config, "BCRYPT_ROUNDS", 4)

    engine = create_engine(
        f"sqlite+pysqlite:///{test_db_path}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    # Patch the shared database module so router dependencies use the test DB.
    db.engine = engine
    db.SessionLocal = TestingSessionLocal

    # Import models so Base metadata is populated, then create tables.
    from backend.app import models  # noqa: F401

    db.Base.metadata.drop_all(bind=engine)
    db.Base.metadata.create_all(bind=engine)

    from backend.app.main import app as fastapi_app

    yield fastapi_app

    engine.dispose()


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture()
def db_session(app: FastAPI):
    """
    Direct SQLAlchemy session bound to the same temporary SQLite DB used by the test app.
    """
    from backend.app.database import SessionLocal

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def make_job(db_session):
    from backend.app.repositories.jobs import JobRepository

    jobs = JobRepository(db_session)

    def _make_job(**fields):
        defaults = {
            "company": "Acme",
            "role": "Backend Engineer",
            "city": "Berlin",
            "country": "Germany",
            "skill_level": "Mid-Level",
        }
        defaults.update(fields)
        return jobs.add(**defaults)

    return _make_job


@pytest.fixture()
def job(make_job):
    return make_job(
        id=JOB_ID,
        key_responsibilities="Build APIs; Review code ;",
        preferred_skills="Python; SQL",
        languages="English, German",
        technologies_mentioned="FastAPI,PostgreSQL",
        min_years_experience=2,
    )


@pytest.fixture()
def alice(client) -> dict:
    """Signed-up and signed-in user: {"userId", "username", "token", "headers"}."""
    r = client.post("/signup", json={"username": "alice", "password": "p1"})
    assert r.status_code == 201, r.text
    data = client.post("/signin", json={"username": "alice", "password": "p1"}).json()
    return {
        "userId": data["userId"],
        "username": data["username"],
        "token": data["token"],
        "headers": {"Authorization": f"Bearer {data['token']}"},
    }
