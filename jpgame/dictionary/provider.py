from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

import structlog
from pydantic import ValidationError

from jpgame.dictionary.schema import DictionaryDocument
from jpgame.game.errors import DictionaryUnavailableError
from jpgame.game.types import QuestionRecord

logger = structlog.get_logger("jpgame.dictionary.provider")


def parse_dictionary(raw: str | bytes, *, source: str = "<memory>") -> tuple[QuestionRecord, ...]:
    """Parses a JSON dictionary document into question records."""

    try:
        document = DictionaryDocument.model_validate_json(raw)
    except ValidationError as exc:
        raise DictionaryUnavailableError(
            f"dictionary {source} is malformed: {exc.error_count()} validation error(s)"
        ) from exc

    if not document.words:
        raise DictionaryUnavailableError(f"dictionary {source} contains no words")
    return tuple(entry.to_record() for entry in document.words)


class JsonFileQuestionProvider:
    """Reads the dictionary file on every request, so edits apply to the next question."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load_records(self) -> Sequence[QuestionRecord]:
        try:
            raw = self.path.read_bytes()
        except OSError as exc:
            logger.error("dictionary_unavailable", path=str(self.path), reason=exc.strerror)
            raise DictionaryUnavailableError(f"cannot read dictionary {self.path}: {exc.strerror}") from exc

        try:
            records = parse_dictionary(raw, source=str(self.path))
        except DictionaryUnavailableError as exc:
            logger.error("dictionary_unavailable", path=str(self.path), reason=str(exc))
            raise

        logger.debug("dictionary_loaded", path=str(self.path), records_total=len(records))
        return records


class InMemoryQuestionProvider:
    def __init__(self, records: Iterable[QuestionRecord]) -> None:
        self._records = tuple(records)

    def load_records(self) -> Sequence[QuestionRecord]:
        if not self._records:
            raise DictionaryUnavailableError("dictionary contains no words")
        return self._records
