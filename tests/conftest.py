"""
Shared fixtures: an in-memory SQLite database rebuilt for every test, a
mocked email backend and factories for users, profiles, jobs and resumes.
"""

import os
import tempfile

# Settings are read once, so the environment must be prepared before import
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["EMAIL_BACKEND"] = "log"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="hirehub-uploads-")
os.environ["JWT_SECRET_KEY"] = "test-secret-key-for-hirehub-tests"
os.environ["DEBUG"] = "false"

from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from hirehub.core.auth import create_access_token
from hirehub.db import tables  # noqa: F401
from hirehub.db.database import Base, get_engine, get_session_factory
from hirehub.main import app
from hirehub.schemas.schemas import UserCreate, UserRole
from hirehub.services.email_service import EmailService, get_email_service
from hirehub.services.user_service import UserService

PASSWORD = "secret123"


@pytest.fixture(autouse=True)
def reset_database():
    engine = get_engine()
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def upload_dir():
    return os.environ["UPLOAD_DIR"]


@pytest.fixture
def db():
    session = get_session_factory()()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def email_service():
    """Email backend double; send_email reports success unless a test changes it."""
    service = Mock(spec=EmailService)
    service.send_email = AsyncMock(return_value=True)
    return service


@pytest.fixture
def client(email_service):
    app.dependency_overrides[get_email_service] = lambda: email_service
    yield TestClient(app)
    app.dependency_overrides.clear()


def auth_headers(user: dict) -> dict:
    token, _ = create_access_token({"sub": user["userId"], "role": user["role"], "email": user["email"]})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_user(client):
    """Register a user through the API and attach auth headers."""
    def _make(role: str = "JobSeeker", email: str = None, full_name: str = "Test User") -> dict:
        email = email or f"{role.lower()}-{os.urandom(4).hex()}@example.com"
        resp = client.post("/api/User/register", json={
            "fullName": full_name, "email": email, "password": PASSWORD, "role": role,
        })
        assert resp.status_code == 201, resp.text
        user = resp.json()
        user["headers"] = auth_headers(user)
        return user
    return _make


@pytest.fixture
def admin(db, email_service):
    user = UserService(db, email_service).create(UserCreate(
        full_name="Site Admin", email="admin@example.com", password=PASSWORD, role=UserRole.admin,
    ))
    data = {"userId": user.user_id, "role": user.role, "email": user.email}
    data["headers"] = auth_headers(data)
    return data


@pytest.fixture
def make_employer(client, make_user):
    def _make(company_name: str = "Acme Corp", full_name: str = "Erin Employer") -> dict:
        user = make_user("Employer", full_name=full_name)
        resp = client.post("/api/Employer", headers=user["headers"], json={
            "userId": user["userId"], "companyName": company_name, "position": "HR Manager",
        })
        assert resp.status_code == 201, resp.text
        user["profile"] = resp.json()
        return user
    return _make


@pytest.fixture
def employer(make_employer):
    return make_employer()


@pytest.fixture
def make_job_seeker(client, make_user):
    def _make(full_name: str = "Sam Seeker", skills: str = "Python, SQL", college: str = "State University") -> dict:
        user = make_user("JobSeeker", full_name=full_name)
        resp = client.post("/api/JobSeeker", headers=user["headers"], json={
            "userId": user["userId"], "skills": skills, "college": college,
        })
        assert resp.status_code == 201, resp.text
        user["profile"] = resp.json()
        return user
    return _make


@pytest.fixture
def job_seeker(make_job_seeker):
    return make_job_seeker()


@pytest.fixture
def make_job(client):
    def _make(owner: dict, title: str = "Backend Developer", **fields) -> dict:
        payload = {
            "employerId": owner["profile"]["employerId"],
            "title": title,
            "description": "Build APIs",
            "location": "Berlin",
            "salary": 65000,
            "skillsRequired": "Python, SQL, Docker",
        }
        payload.update(fields)
        resp = client.post("/api/Job", headers=owner["headers"], json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _make


@pytest.fixture
def job(employer, make_job):
    return make_job(employer)


@pytest.fixture
def make_resume(client):
    def _make(owner: dict, name: str = "Main CV", is_default: bool = True) -> dict:
        resp = client.post("/api/Resume/metadata", headers=owner["headers"], json={
            "jobSeekerId": owner["profile"]["jobSeekerId"],
            "resumeName": name,
            "isDefault": is_default,
            "parsedSkills": "Python",
        })
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _make


@pytest.fixture
def resume(job_seeker, make_resume):
    return make_resume(job_seeker)


@pytest.fixture
def application(client, job, job_seeker, resume):
    resp = client.post("/api/Application", headers=job_seeker["headers"], json={
        "jobId": job["jobId"], "jobSeekerId": job_seeker["profile"]["jobSeekerId"],
        "resumeId": resume["resumeId"], "coverLetter": "Hire me",
    })
    assert resp.status_code == 201, resp.text
    return resp.json()
