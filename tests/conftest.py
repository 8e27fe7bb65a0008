import os
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Set environment variables BEFORE any imports that might use settings
# Use a temporary directory for test database to avoid permission issues
_test_db_dir = tempfile.mkdtemp()
_test_db_path = os.path.join(_test_db_dir, "test_promocode_factory.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_test_db_path}"

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session

from promocode_factory.main import app
from promocode_factory.db.models.partner import Partner as PartnerModel
from promocode_factory.db.models.partner_promo_code_limit import (
    PartnerPromoCodeLimit as PartnerPromoCodeLimitModel,
)

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test and run migrations."""
    temp_db_dir = tempfile.mkdtemp()
    test_db_path = os.path.join(temp_db_dir, "test.db")
    test_db_url = f"sqlite:///{test_db_path}"

    test_engine = create_engine(
        test_db_url,
        connect_args={"check_same_thread": False},
    )

    # Enable WAL mode to reduce locking issues
    @event.listens_for(test_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=test_engine
    )

    # Run Alembic migrations to set up the database schema
    alembic_cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    alembic_cfg.set_main_option("sqlalchemy.url", test_db_url)
    command.upgrade(alembic_cfg, "head")

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        test_engine.dispose()

        # Clean up - remove test database file, WAL files and directory
        for suffix in ["", "-wal", "-shm"]:
            path = f"{test_db_path}{suffix}"
            if os.path.exists(path):
                os.remove(path)
        if os.path.exists(temp_db_dir):
            os.rmdir(temp_db_dir)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    from promocode_factory.api.deps import get_db

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def db(db_session):
    """Alias for db_session to match test naming conventions."""
    return db_session


def _create_partner(
    db: Session,
    name: str = "Toy Store",
    is_active: bool = True,
    number_issued_promo_codes: int = 0,
    limits: list[int] | None = None,
) -> PartnerModel:
    """Create a partner. Each entry of ``limits`` becomes an active limit, oldest first."""
    partner = PartnerModel(
        name=name,
        is_active=is_active,
        number_issued_promo_codes=number_issued_promo_codes,
    )
    created = datetime.now(timezone.utc) - timedelta(days=len(limits or []))
    for offset, limit in enumerate(limits or []):
        partner.limits.append(
            PartnerPromoCodeLimitModel(
                limit=limit,
                create_date=created + timedelta(days=offset),
            )
        )
    db.add(partner)
    db.commit()
    db.refresh(partner)
    return partner


@pytest.fixture(scope="function")
def active_partner(db: Session) -> PartnerModel:
    """An active partner with one active limit and three issued promo codes."""
    return _create_partner(db, number_issued_promo_codes=3, limits=[100])


@pytest.fixture(scope="function")
def inactive_partner(db: Session) -> PartnerModel:
    """A deactivated partner with one active limit."""
    return _create_partner(
        db, name="Dream Fish", is_active=False, number_issued_promo_codes=3, limits=[50]
    )


@pytest.fixture(scope="function")
def make_partner(db: Session):
    """Factory for partners with custom status, counter and limits."""

    def _make(**kwargs) -> PartnerModel:
        return _create_partner(db, **kwargs)

    return _make
