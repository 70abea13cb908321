"""
Shared fixtures: an in-memory SQLite database rebuilt for every test, a
TestClient bound to the application, seeded users per role and a bearer
header factory.
"""
import os

# required settings must exist before learnhub is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["STRIPE_SECRET_KEY"] = "sk_test_dummy"
os.environ["PORT"] = "5000"
os.environ["TEACHER_REQUEST_ALLOW_RESUBMIT"] = "false"

import pytest
from fastapi.testclient import TestClient

from learnhub.core.security import create_access_token
from learnhub.db.base import Base
from learnhub.db.session import SessionLocal, engine
from learnhub.main import app
from learnhub.models.course import Course
from learnhub.models.user import ROLE_ADMIN, ROLE_NORMAL, ROLE_TEACHER
from learnhub.services import user_service

ADMIN_EMAIL = "admin@learnhub.io"
TEACHER_EMAIL = "teacher@learnhub.io"
STUDENT_EMAIL = "student@learnhub.io"


@pytest.fixture(autouse=True)
def _schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def auth_headers():
    def _headers(email: str) -> dict:
        token = create_access_token(data={"email": email})
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def admin_user(db_session):
    user, _ = user_service.register_user(db_session, email=ADMIN_EMAIL, role=ROLE_ADMIN)
    return user


@pytest.fixture
def teacher_user(db_session):
    user, _ = user_service.register_user(
        db_session, email=TEACHER_EMAIL, name="Test Teacher", role=ROLE_TEACHER
    )
    return user


@pytest.fixture
def student_user(db_session):
    user, _ = user_service.register_user(db_session, email=STUDENT_EMAIL, role=ROLE_NORMAL)
    return user


def class_payload(**overrides) -> dict:
    payload = {
        "title": "Watercolor Basics",
        "name": "Test Teacher",
        "email": TEACHER_EMAIL,
        "price": 49.0,
        "description": "Washes, glazing and color mixing.",
        "image": "https://img.learnhub.io/watercolor.png",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def pending_class(db_session, teacher_user):
    course = Course(**class_payload(), status="pending", total_enrollments=0)
    db_session.add(course)
    db_session.commit()
    db_session.refresh(course)
    return course


@pytest.fixture
def approved_class(db_session, teacher_user):
    course = Course(
        **class_payload(title="Approved Sketching"),
        status="approved",
        total_enrollments=0,
    )
    db_session.add(course)
    db_session.commit()
    db_session.refresh(course)
    return course
