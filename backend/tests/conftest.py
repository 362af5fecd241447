import os
import tempfile

# Must be set before boxoffice.core.config is imported.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault(
    "LOG_DIR", os.path.join(tempfile.gettempdir(), "boxoffice-test-logs")
)

from collections.abc import Generator  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.engine import Engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

import boxoffice.models  # noqa: E402, F401
from boxoffice.core.db import get_db  # noqa: E402
from boxoffice.main import app  # noqa: E402
from boxoffice.services.ledger import CapacityLedger  # noqa: E402

from .fixtures.factories import *  # noqa: E402, F403


@pytest.fixture(scope="function")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine: Engine) -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


@pytest.fixture(scope="function")
def ledger() -> CapacityLedger:
    return CapacityLedger(lock_timeout=1.0)


@pytest.fixture(scope="function")
def client(
    db_session: Session, ledger: CapacityLedger
) -> Generator[TestClient, None, None]:
    def override_get_db() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as c:
        # The lifespan hook builds a ledger for the app's own database.
        app.state.ledger = ledger
        yield c

    app.dependency_overrides.clear()
