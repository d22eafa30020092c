# parsers/models.py

from dataclasses import dataclass, field
from enum import Enum

RANKING_SELECTIONS = 3


class QuestionKind(str, Enum):
    """Question kinds the Markdown grammar can express."""

    TEXT = "text"
    SINGLE_CHOICE = "single_choice"
    MULTI_CHOICE = "multi_choice"
    RANKING = "ranking"

    @property
    def collects_options(self) -> bool:
        return self is not QuestionKind.TEXT


@dataclass(frozen=True)
class ParsedQuestion:
    text: str
    kind: QuestionKind
    options: list[str] = field(default_factory=list)
    required: bool = True
    max_selections: int | None = None


@dataclass(frozen=True)
class ParsedSection:
    title: str
    questions: list[ParsedQuestion] = field(default_factory=list)
    description: str | None = None


@dataclass(frozen=True)
class ParsedDocument:
    title: str
    description: str
    sections: list[ParsedSection]

    @property
    def question_count(self) -> int:
        return sum(len(section.questions) for section in self.sections)
