import os
import shutil
import tempfile
from pathlib import Path

import pytest

# Point the app at a throwaway SQLite file before any users_api module is imported
_TMP_DIR = Path(tempfile.mkdtemp(prefix="users_api_test_"))
os.environ["DATABASE__URL"] = f"sqlite:///{_TMP_DIR / 'users_test.db'}"


@pytest.fixture(scope="session", autouse=True)
def _tmp_db_dir():
    yield _TMP_DIR
    from users_api.core.database import engine

    engine.dispose()
    shutil.rmtree(_TMP_DIR, ignore_errors=True)


@pytest.fixture(autouse=True)
def _fresh_tables():
    # Recreate the schema per test so AUTOINCREMENT ids restart at 1
    from sqlmodel import SQLModel
    from users_api.core.database import engine, init_db

    SQLModel.metadata.drop_all(engine)
    init_db()
    yield


@pytest.fixture()
def client():
    from fastapi.testclient import TestClient
    from users_api.main import app

    # Context manager form runs the lifespan hooks
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def db():
    from users_api.core.database import SessionFactory

    with SessionFactory() as session:
        yield session


@pytest.fixture()
def add_users(db):
    from users_api.features.users.models import User

    def _add(count: int = 1):
        count = max(count, 1)
        for i in range(count):
            db.add(User(name=f"User {i + 1}", age=(i + 1) * 10))
        db.commit()

    return _add
