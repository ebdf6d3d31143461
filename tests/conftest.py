import os
import tempfile

# Point the app at a throwaway SQLite file before db.py is imported
_TMP_DIR = tempfile.mkdtemp(prefix="quiz-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'quiz.db')}"
os.environ.pop("QUIZ_SEED", None)
os.environ.pop("GAME_CONFIG_PATH", None)

import random  # noqa: E402

import pytest  # noqa: E402

from db import init_db  # noqa: E402
from game_config import reload_config  # noqa: E402

init_db()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture(autouse=True)
def _default_config(monkeypatch):
    monkeypatch.delenv("GAME_CONFIG_PATH", raising=False)
    reload_config()
    yield
    monkeypatch.delenv("GAME_CONFIG_PATH", raising=False)
    reload_config()
