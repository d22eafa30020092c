from .base import SurveyParser
from .config import ParserConfig
from .markdown_parser import MarkdownSurveyParser, parse_survey_markdown
from .models import (
    RANKING_SELECTIONS,
    ParsedDocument,
    ParsedQuestion,
    ParsedSection,
    QuestionKind,
)

__all__ = [
    "MarkdownSurveyParser",
    "ParsedDocument",
    "ParsedQuestion",
    "ParsedSection",
    "ParserConfig",
    "QuestionKind",
    "RANKING_SELECTIONS",
    "SurveyParser",
    "parse_survey_markdown",
]
