import os
import tempfile

_tmpdir = tempfile.mkdtemp(prefix="eduassess-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{_tmpdir}/test.db"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["JWT_SECRET"] = "test-secret"

import pytest
from fastapi.testclient import TestClient

from eduassess.core.db import Base, SessionLocal, engine
from eduassess.core.security import Identity, create_access_token, hash_password
from eduassess.main import app
from eduassess.models import Assessment, Question, User

@pytest.fixture(autouse=True)
def fresh_tables():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield

@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c

def make_user(db, email="student@school.org", role="student", name="Student", password="secret1"):
    user = User(email=email, password=hash_password(password), name=name, role=role)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user

def identity_for(user) -> Identity:
    return Identity(user_id=user.id, email=user.email, role=user.role)

def auth_header(user) -> dict:
    return {"Authorization": f"Bearer {create_access_token(identity_for(user))}"}

def make_assessment(db, questions=(), category="Programming", title="Python Basics", active=True):
    """questions: iterable of (correct_answer, points)."""
    a = Assessment(title=title, description="desc", skill_category=category, is_active=active)
    for order, (correct, points) in enumerate(questions, start=1):
        a.questions.append(Question(
            question_text=f"Question {order}",
            option_a="a", option_b="b", option_c="c", option_d="d",
            correct_answer=correct,
            points=points,
            question_order=order,
        ))
    db.add(a)
    db.commit()
    db.refresh(a)
    return a

@pytest.fixture
def student(db):
    return make_user(db)

@pytest.fixture
def admin(db):
    return make_user(db, email="admin@school.org", role="admin", name="Admin")
