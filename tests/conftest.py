# /tests/conftest.py

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from school_admin.db.database import init_db, get_db
from school_admin.main import app
from school_admin.models.class_model import ClassCreate
from school_admin.models.student_model import StudentCreate
from school_admin.services import class_service, student_service
from school_admin.services.database_service import DatabaseService


@pytest.fixture
def engine():
    """
    A fresh in-memory SQLite database per test. StaticPool keeps the single
    connection alive so every session sees the same data.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def db_service(db_session):
    """Provides a real DatabaseService so that commits and rollbacks actually happen."""
    return DatabaseService(db_session)


@pytest.fixture
def client(session_factory):
    """A TestClient whose requests each get their own session on the test database."""
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# --- Seed Data Helpers ---

@pytest.fixture
def make_class(db_service):
    def _make_class(name="Math-101", teacher="A", description=None):
        return class_service.create_class(
            db=db_service,
            class_data=ClassCreate(name=name, teacher=teacher, description=description),
        )
    return _make_class


@pytest.fixture
def make_student(db_service):
    def _make_student(name="Alice", className="Math-101", email=None, status="Active"):
        return student_service.create_student(
            db=db_service,
            student_data=StudentCreate(name=name, className=className, email=email, status=status),
        )
    return _make_student
