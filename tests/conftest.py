# tests/conftest.py
import os
import tempfile
from typing import Callable, Dict, Iterator

# Configure the app for an in-memory database before anything imports it
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["UPLOAD_DIRECTORY"] = tempfile.mkdtemp(prefix="ringconnect-uploads-")
os.environ["R2_ENDPOINT"] = ""
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from ringconnect.core.security import create_access_token
from ringconnect.db.base import Base
from ringconnect.db.session import SessionLocal, engine, get_db
from ringconnect.main import app as fastapi_app
from ringconnect.modules.posts.models.post import Post
from ringconnect.modules.posts.schemas.post import PostCreate
from ringconnect.modules.posts.services.post import create_post
from ringconnect.modules.profiles.models.user import User
from ringconnect.modules.profiles.services.user import create_user

PASSWORD = "supersecret123"


@pytest.fixture(scope="session", autouse=True)
def schema() -> Iterator[None]:
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db_session() -> Iterator[Session]:
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        # Each test starts from empty tables even though services commit
        with engine.begin() as conn:
            for table in reversed(Base.metadata.sorted_tables):
                conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_get_db(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_db_override() -> Iterator[Session]:
        yield db_session

    app.dependency_overrides[get_db] = _get_db_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(get_db, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def user(db_session: Session) -> User:
    """Primary test user, an athlete"""
    return create_user(db_session, "ana@ringconnect.app", "ana.silva", PASSWORD, "Ana Silva")


@pytest.fixture()
def other_user(db_session: Session) -> User:
    """Secondary test user, a coach"""
    return create_user(db_session, "bruno@ringconnect.app", "bruno_coach", PASSWORD, "Bruno Costa", user_type="coach")


@pytest.fixture()
def auth_headers(user: User) -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture()
def other_auth_headers(other_user: User) -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(other_user.id)}"}


@pytest.fixture()
def make_post(db_session: Session, user: User) -> Callable[..., Post]:
    """Create a post directly through the service; author defaults to ``user``"""
    def _make_post(author: User = None, **fields) -> Post:
        fields.setdefault("content", "Treino pesado hoje")
        return create_post(db_session, PostCreate(**fields), (author or user).id)

    return _make_post
