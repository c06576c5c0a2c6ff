"""Application configuration loaded from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)


@dataclass(frozen=True)
class QuestionSource:
    """A question file, or glob of files, relative to the data directory.

    ``has_header`` forces the first row to be skipped (True) or kept (False).
    When left as None the loader sniffs each row for header markers.
    """

    pattern: str
    has_header: bool | None = None


APP_NAME = os.getenv("APP_NAME", "FullStack Quiz")
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")

DATA_DIR = Path(os.getenv("QUIZ_DATA_DIR", str(Path(__file__).parent / "data" / "questions")))

CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

ALLOWED_TECHNOLOGIES = ("spring", "java", "angular")
ALLOWED_COUNTS = (10, 20, 30)

# Single-file banks come first, then every file of the per-topic directory
TOPIC_SOURCES: dict[str, list[QuestionSource]] = {
    "spring": [
        QuestionSource("spring-questions.csv"),
        QuestionSource("java/*.csv"),
    ],
    "angular": [
        QuestionSource("angular-questions.csv"),
        QuestionSource("angular/*.csv"),
    ],
}
