"""Quiz routes for fetching random questions and app info."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from .. import config
from ..models.question import AppInfo, QuestionResponse
from ..services.quiz_service import QuizService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["quiz"])


def get_quiz_service(request: Request) -> QuizService:
    service: QuizService | None = getattr(request.app.state, "quiz_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Question store is not initialized",
        )
    return service


def is_valid_technology(technology: str) -> bool:
    return technology.lower() in config.ALLOWED_TECHNOLOGIES


def is_valid_count(count: int) -> bool:
    return count in config.ALLOWED_COUNTS


@router.get("/questions/{technology}/{count}", response_model=list[QuestionResponse])
def get_questions(
    technology: str,
    count: int,
    service: QuizService = Depends(get_quiz_service),
) -> list[QuestionResponse]:
    """Get random questions for a technology (spring, java or angular) and count (10, 20 or 30)."""
    logger.info(f"Request received for {count} questions on {technology}")

    if not is_valid_technology(technology):
        logger.warning(f"Invalid technology requested: {technology}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported technology: {technology}",
        )

    if not is_valid_count(count):
        logger.warning(f"Invalid count requested: {count}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Count must be one of {', '.join(str(c) for c in config.ALLOWED_COUNTS)}",
        )

    questions = service.get_random_questions(technology, count)

    if not questions:
        logger.warning(f"No questions found for {technology} with count {count}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No questions found for {technology}",
        )

    return [QuestionResponse.from_question(q) for q in questions]


@router.get("/info", response_model=AppInfo)
def get_app_info() -> AppInfo:
    """Get application information including version."""
    logger.debug("Request received for application info")
    return AppInfo(version=config.APP_VERSION, name=config.APP_NAME)
