import os
import sys
from pathlib import Path

# Set before any `backend.app` import so config never reads a local .env and the
# module-level engine never points at dev.db.
os.environ["DISABLE_DOTENV"] = "1"
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(scope="session")
def test_db_path(tmp_path_factory: pytest.TempPathFactory) -> Path:
    return tmp_path_factory.mktemp("db") / "test.sqlite3"


@pytest.fixture()
def app(test_db_path: Path) -> FastAPI:
    """
    The real FastAPI app, with its session factory swapped for one bound to a
    fresh temporary SQLite file. Startup hooks do not run, so tables are made here.
    """
    from backend.app import database as db
    from backend.app import models  # noqa: F401

    engine = create_engine(
        f"sqlite+pysqlite:///{test_db_path}",
        connect_args={"check_same_thread": False},
    )
    db.engine = engine
    db.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    db.Base.metadata.drop_all(bind=engine)
    db.Base.metadata.create_all(bind=engine)

    from backend.app.main import app as fastapi_app

    fastapi_app.dependency_overrides.clear()
    fastapi_app.state.db_init_error = None
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()
    fastapi_app.state.db_init_error = None
    engine.dispose()


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture()
def db_session(app: FastAPI):
    """Session on the same temporary database the app is using."""
    from backend.app.database import SessionLocal

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
