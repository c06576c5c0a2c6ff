"""Builders for question banks used across the test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from quiz_app.models.question import Question

HEADER = "question;option1;option2;option3;option4;correctIndex"


def make_rows(prefix: str, count: int) -> list[str]:
    """Rows of the form ``<prefix> item <i>?;A<i>;B<i>;C<i>;D<i>;<i % 4>``."""
    return [f"{prefix} item {i}?;A{i};B{i};C{i};D{i};{i % 4}" for i in range(count)]


def write_bank(path: Path, rows: Iterable[str], header: str | None = HEADER) -> Path:
    """Write a semicolon-delimited question bank."""
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = ([header] if header else []) + list(rows)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def make_questions(count: int, prefix: str = "Q") -> list[Question]:
    return [
        Question(
            text=f"{prefix} {i}",
            options=(f"A{i}", f"B{i}", f"C{i}", f"D{i}"),
            correct_index=i % 4,
        )
        for i in range(count)
    ]
