"""Question store for loading and holding quiz questions per topic."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, Mapping, Sequence, TypedDict

from pydantic import ValidationError

from ..config import QuestionSource
from ..models.question import Question

logger = logging.getLogger(__name__)

FIELD_COUNT = 6
DELIMITER = ";"

# Markers seen in hand-edited banks, English and Polish
_HEADER_TEXT_MARKERS = ("question", "pytanie")
_HEADER_INDEX_MARKERS = ("correct", "index", "indeks")


class LoadError(TypedDict):
    topic: str
    source: str
    error: str


def normalize_topic(topic: str) -> str:
    return topic.strip().lower()


def is_header_row(row: Sequence[str]) -> bool:
    """Check if a row looks like a column header rather than a question."""
    if len(row) < FIELD_COUNT:
        return False

    first_column = row[0].lower()
    last_column = row[5].lower()
    return any(marker in first_column for marker in _HEADER_TEXT_MARKERS) or any(
        marker in last_column for marker in _HEADER_INDEX_MARKERS
    )


def parse_rows(
    rows: Iterable[Sequence[str]],
    source_name: str = "<memory>",
    has_header: bool | None = None,
) -> list[Question]:
    """
    Turn delimited rows into questions.

    Each row is ``text;opt1;opt2;opt3;opt4;correctIndex``. Short rows, header
    rows and rows that fail validation are skipped and logged; they never
    abort the rest of the source.
    """
    questions: list[Question] = []
    first_row = True

    for row_number, row in enumerate(rows, start=1):
        if not any(field.strip() for field in row):
            continue
        is_first, first_row = first_row, False
        if is_first and has_header:
            continue
        if len(row) < FIELD_COUNT:
            logger.warning(
                f"Skipping row {row_number} in {source_name}: "
                f"expected {FIELD_COUNT} fields, got {len(row)}"
            )
            continue
        if has_header is None and is_header_row(row):
            log = logger.info if is_first else logger.warning
            log(f"Skipping header row {row_number} in {source_name}: {row[0]!r}")
            continue

        try:
            correct_index = int(row[5].strip())
        except ValueError:
            logger.warning(
                f"Skipping row {row_number} in {source_name}: "
                f"correct index {row[5]!r} is not a number"
            )
            continue

        try:
            question = Question(
                text=row[0],
                options=(row[1], row[2], row[3], row[4]),
                correct_index=correct_index,
            )
        except ValidationError as e:
            logger.warning(f"Skipping row {row_number} in {source_name}: {e.errors()[0]['msg']}")
            continue

        questions.append(question)

    return questions


def read_source(path: Path, has_header: bool | None = None) -> list[Question]:
    """Load questions from a single semicolon-delimited UTF-8 file."""
    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        reader = csv.reader(f, delimiter=DELIMITER)
        return parse_rows(reader, source_name=path.name, has_header=has_header)


def _resolve_paths(data_dir: Path, pattern: str) -> list[Path]:
    """Expand a source pattern; plain names are returned even if missing."""
    if not any(ch in pattern for ch in "*?["):
        return [data_dir / pattern]

    paths = sorted(p for p in data_dir.glob(pattern) if p.is_file())
    if not paths:
        logger.warning(f"No question files match {pattern} in {data_dir}")
    return paths


class QuestionStore:
    """Read-only store of question pools keyed by topic."""

    def __init__(
        self,
        pools: Mapping[str, Iterable[Question]] | None = None,
        load_errors: Iterable[LoadError] = (),
    ) -> None:
        self._pools: dict[str, tuple[Question, ...]] = {}
        for topic, questions in (pools or {}).items():
            key = normalize_topic(topic)
            self._pools[key] = self._pools.get(key, ()) + tuple(questions)
        self._load_errors: tuple[LoadError, ...] = tuple(load_errors)

    @classmethod
    def from_sources(
        cls,
        data_dir: Path,
        topic_sources: Mapping[str, Sequence[QuestionSource]],
    ) -> QuestionStore:
        """
        Build the store from question files on disk.

        Sources of a topic are concatenated in order, duplicates included.
        A source that cannot be read contributes nothing and is recorded as
        a load error; it never stops the remaining sources from loading.
        """
        logger.info(f"Initializing question store from {data_dir}...")
        pools: dict[str, list[Question]] = {}
        load_errors: list[LoadError] = []

        for topic, sources in topic_sources.items():
            key = normalize_topic(topic)
            questions = pools.setdefault(key, [])

            for source in sources:
                for path in _resolve_paths(data_dir, source.pattern):
                    try:
                        loaded = read_source(path, has_header=source.has_header)
                    except (OSError, UnicodeDecodeError, csv.Error) as e:
                        logger.error(f"Error loading questions for {topic} from {path.name}: {e}")
                        load_errors.append({"topic": key, "source": str(path), "error": str(e)})
                        continue

                    questions.extend(loaded)
                    logger.info(f"Loaded {len(loaded)} questions from {path.name}")

            logger.info(f"Total loaded {len(questions)} questions for {topic}")

        logger.info("Question store initialized")
        return cls(pools, load_errors)

    def get(self, topic: str) -> tuple[Question, ...]:
        """Get the full question pool for a topic, empty if unknown."""
        return self._pools.get(normalize_topic(topic), ())

    def available(self, topic: str) -> int:
        return len(self.get(topic))

    def topics(self) -> list[str]:
        return sorted(self._pools)

    @property
    def load_errors(self) -> tuple[LoadError, ...]:
        return tuple(LoadError(**error) for error in self._load_errors)

    def get_stats(self) -> dict[str, int]:
        """Get question counts per topic."""
        return {topic: len(self._pools[topic]) for topic in self.topics()}
