from __future__ import annotations

import random
from pathlib import Path
from typing import Sequence

import pytest
from fastapi.testclient import TestClient

from quiz_app import config
from quiz_app.config import QuestionSource
from quiz_app.data.question_store import QuestionStore
from quiz_app.main import app
from quiz_app.services.quiz_service import QuizService

from helpers import make_questions, make_rows, write_bank


@pytest.fixture
def spring_store() -> QuestionStore:
    """Store with 35 spring questions and nothing else."""
    return QuestionStore({"spring": make_questions(35, "Spring")})


@pytest.fixture
def seeded_service(spring_store: QuestionStore) -> QuizService:
    return QuizService(spring_store, rng=random.Random(1234))


@pytest.fixture
def bank_dir(tmp_path: Path) -> Path:
    """Question bank with 35 spring questions split over two sources and 12 angular."""
    write_bank(tmp_path / "spring-questions.csv", make_rows("Spring", 25))
    write_bank(tmp_path / "java" / "core.csv", make_rows("Java", 10), header=None)
    write_bank(tmp_path / "angular-questions.csv", make_rows("Angular", 12))
    return tmp_path


@pytest.fixture
def topic_sources() -> dict[str, Sequence[QuestionSource]]:
    return {
        "spring": [QuestionSource("spring-questions.csv"), QuestionSource("java/*.csv")],
        "angular": [QuestionSource("angular-questions.csv"), QuestionSource("angular/*.csv")],
    }


@pytest.fixture
def client(monkeypatch, bank_dir, topic_sources):
    """Test client whose startup loads the temporary question bank."""
    monkeypatch.setattr(config, "DATA_DIR", bank_dir)
    monkeypatch.setattr(config, "TOPIC_SOURCES", topic_sources)
    with TestClient(app) as test_client:
        yield test_client
