# src/survey_kit/importing/importer.py

import logging
from dataclasses import dataclass
from pathlib import Path
from time import monotonic
from typing import Any

from survey_kit.observability import names
from survey_kit.observability.base import MetricsHook, NoOpMetricsHook
from survey_kit.parsers.config import ParserConfig
from survey_kit.parsers.markdown_parser import MarkdownSurveyParser
from survey_kit.questions.models import NormalizedQuestion
from survey_kit.questions.normalizer import normalize_questions

from .errors import SurveyImportError, UnsupportedFileTypeError

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".md", ".txt")
MANUAL_INPUT = "manual input"


@dataclass(frozen=True)
class SurveyImportPreview:
    """What the import screen shows before the client confirms.

    Immutable. Rebuilt from scratch on every edit of the source text.
    """

    title: str
    description: str
    questions: list[NormalizedQuestion]
    sections_count: int
    source_name: str = MANUAL_INPUT

    @property
    def questions_count(self) -> int:
        return len(self.questions)

    def question_rows(self, survey_id: str) -> list[dict[str, Any]]:
        """Rows that replace the survey's whole question set."""
        return [question.to_row(survey_id) for question in self.questions]


def import_survey_text(
    text: str,
    *,
    source_name: str = MANUAL_INPUT,
    config: ParserConfig = ParserConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> SurveyImportPreview:
    """Run parse and normalize over pasted or uploaded survey text.

    Raises:
        SurveyImportError: If anything in the pipeline fails. The original
            exception is chained as ``__cause__``.
    """
    start = monotonic()
    parser = MarkdownSurveyParser(config=config, metrics_hook=metrics_hook)
    try:
        document = parser.parse(text)
        questions = normalize_questions(document, metrics_hook=metrics_hook)
    except Exception as exc:
        logger.error("Failed to parse survey from %s: %s", source_name, exc)
        metrics_hook.increment(names.SURVEY_IMPORT_ERRORS_TOTAL)
        raise SurveyImportError(f"Failed to parse survey from {source_name}") from exc

    preview = SurveyImportPreview(
        title=document.title,
        description=document.description,
        questions=questions,
        sections_count=len(document.sections),
        source_name=source_name,
    )

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.SURVEY_IMPORT_DURATION, elapsed_ms)
    metrics_hook.increment(names.SURVEY_IMPORTS_TOTAL)
    logger.info(
        "Imported survey %r from %s with %d questions",
        preview.title,
        source_name,
        preview.questions_count,
    )
    return preview


def import_survey_file(
    path: str | Path,
    *,
    config: ParserConfig = ParserConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> SurveyImportPreview:
    """Import a survey from a .md or .txt file (UTF-8, optional BOM)."""
    file_path = Path(path)
    if not file_path.name.endswith(SUPPORTED_SUFFIXES):
        logger.error("Unsupported survey file type: %s", file_path.name)
        metrics_hook.increment(names.SURVEY_IMPORT_ERRORS_TOTAL)
        raise UnsupportedFileTypeError(
            f"Unsupported file type '{file_path.name}', "
            f"expected one of {', '.join(SUPPORTED_SUFFIXES)}"
        )

    try:
        text = file_path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        logger.error("Survey file is not valid UTF-8: %s", file_path.name)
        metrics_hook.increment(names.SURVEY_IMPORT_ERRORS_TOTAL)
        raise SurveyImportError(f"Failed to read {file_path.name}") from exc

    return import_survey_text(
        text,
        source_name=file_path.name,
        config=config,
        metrics_hook=metrics_hook,
    )
