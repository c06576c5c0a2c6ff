"""Random question selection over the question store."""

from __future__ import annotations

import logging
import random

from ..data.question_store import QuestionStore
from ..models.question import Question

logger = logging.getLogger(__name__)

# Process-wide, unseeded
_default_rng = random.Random()


class QuizService:
    """Service for picking quiz questions."""

    def __init__(self, store: QuestionStore, rng: random.Random | None = None) -> None:
        self.store = store
        self._rng = rng if rng is not None else _default_rng

    def get_random_questions(self, technology: str, count: int) -> list[Question]:
        """
        Get random questions for a technology.

        Returns ``count`` distinct questions in random order. When fewer are
        available all of them are returned, shuffled. Unknown or empty topics
        give an empty list, which callers treat as "not found".
        """
        all_questions = self.store.get(technology)

        if not all_questions:
            logger.warning(f"No questions found for technology: {technology}")
            return []

        if count <= 0:
            return []

        if count > len(all_questions):
            logger.warning(
                f"Requested count {count} exceeds available questions {len(all_questions)}. Returning all."
            )
            count = len(all_questions)

        return self._rng.sample(all_questions, count)

    def get_all_questions(self, technology: str) -> list[Question]:
        """Get all questions for a technology in stored order."""
        return list(self.store.get(technology))
