import os
import tempfile

# Point the app at a throwaway SQLite file before db.py is imported
_TMP_DIR = tempfile.mkdtemp(prefix="math-practice-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["GEMINI_API_KEY"] = ""

import pytest  # noqa: E402
from sqlalchemy.exc import OperationalError  # noqa: E402

from db import Base, SessionLocal, engine, get_db  # noqa: E402
from deps.providers import get_rng, get_text_generator  # noqa: E402
from main import app  # noqa: E402
from models import AnswerSubmission, ProblemSession  # noqa: E402

Base.metadata.create_all(engine)


class FakeTextGenerator:
    """Returns queued responses in order ("" once empty), or raises `error`."""

    def __init__(self):
        self.responses: list[str] = []
        self.error: Exception | None = None
        self.calls: list[dict] = []

    def generate(self, prompt, *, temperature, max_output_tokens):
        self.calls.append(
            {"prompt": prompt, "temperature": temperature, "max_output_tokens": max_output_tokens}
        )
        if self.error is not None:
            raise self.error
        return self.responses.pop(0) if self.responses else ""


class PickIndex:
    """Stand-in for random.Random: choice() always returns seq[index]."""

    def __init__(self, index: int = 0):
        self.index = index

    def choice(self, seq):
        return seq[self.index]


class FailingCommitSession:
    """Wraps a real session; reads work, commit() blows up."""

    def __init__(self, real):
        self.real = real

    def get(self, *args, **kwargs):
        return self.real.get(*args, **kwargs)

    def add(self, obj):
        pass

    def commit(self):
        raise OperationalError("INSERT", {}, Exception("database is locked"))

    def rollback(self):
        self.real.rollback()

    def refresh(self, obj):
        pass


class FailingLookupSession:
    """Every read fails as if the database were unreachable."""

    def get(self, *args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("could not connect to server"))


@pytest.fixture(autouse=True)
def generator():
    gen = FakeTextGenerator()
    app.dependency_overrides[get_text_generator] = lambda: gen
    yield gen
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def rng():
    r = PickIndex(0)
    app.dependency_overrides[get_rng] = lambda: r
    return r


@pytest.fixture(autouse=True)
def _clean_tables():
    yield
    with SessionLocal() as db:
        db.query(AnswerSubmission).delete()
        db.query(ProblemSession).delete()
        db.commit()


@pytest.fixture
def db():
    s = SessionLocal()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def failing_db():
    real = SessionLocal()

    def _override():
        yield FailingCommitSession(real)

    app.dependency_overrides[get_db] = _override
    yield
    real.close()


@pytest.fixture
def unreachable_db():
    def _override():
        yield FailingLookupSession()

    app.dependency_overrides[get_db] = _override
