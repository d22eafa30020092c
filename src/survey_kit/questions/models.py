from typing import Any, Literal

from pydantic import BaseModel

QuestionType = Literal["text", "multiple_choice"]


class NormalizedQuestion(BaseModel):
    """Persistence-ready question.

    Section metadata is copied onto every question; sections are not stored
    as their own rows.
    """

    question_text: str
    question_type: QuestionType
    options: list[str]
    required: bool
    order_index: int
    is_multiple_select: bool
    max_selections: int | None = None
    section_title: str
    section_description: str | None = None

    class Config:
        extra = "forbid"
        frozen = True

    def to_row(self, survey_id: str) -> dict[str, Any]:
        """Row for the ``questions`` table of the given survey."""
        return {
            "survey_id": survey_id,
            "question_text": self.question_text,
            "question_type": self.question_type,
            "options": list(self.options),
            "required": self.required,
            "order_index": self.order_index,
            "is_multiple_select": self.is_multiple_select,
            "max_selections": self.max_selections,
        }
