from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, model_validator

from jpgame.game.types import QuestionRecord

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]


class DictionaryEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    word: NonEmptyStr
    vars: list[NonEmptyStr] = Field(min_length=1)
    correct: int = Field(ge=0, strict=True)

    @model_validator(mode="after")
    def _correct_points_into_vars(self) -> DictionaryEntry:
        if self.correct >= len(self.vars):
            raise ValueError(f"correct={self.correct} is out of range for {len(self.vars)} vars")
        return self

    def to_record(self) -> QuestionRecord:
        return QuestionRecord(
            prompt=self.word,
            options=tuple(self.vars),
            correct_index=self.correct,
        )


class DictionaryDocument(BaseModel):
    words: list[DictionaryEntry]
