# parsers/markdown_parser.py

import logging
import re
from dataclasses import dataclass, field
from time import monotonic

from survey_kit.observability import names
from survey_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import SurveyParser
from .config import ParserConfig
from .models import (
    RANKING_SELECTIONS,
    ParsedDocument,
    ParsedQuestion,
    ParsedSection,
    QuestionKind,
)

logger = logging.getLogger(__name__)

_RANKING_MARKER = re.compile(r"^\$\$\$1-3\s+")
_BOM = "\ufeff"

_QUESTION_MARKERS: tuple[tuple[str, QuestionKind], ...] = (
    ("##### ", QuestionKind.TEXT),
    ("#### ", QuestionKind.MULTI_CHOICE),
    ("### ", QuestionKind.SINGLE_CHOICE),
)


@dataclass
class _QuestionBuilder:
    text: str
    kind: QuestionKind
    options: list[str] = field(default_factory=list)

    def build(self) -> ParsedQuestion:
        return ParsedQuestion(
            text=self.text,
            kind=self.kind,
            options=list(self.options),
            required=True,
            max_selections=(
                RANKING_SELECTIONS if self.kind is QuestionKind.RANKING else None
            ),
        )


@dataclass
class _SectionBuilder:
    title: str
    description: str | None = None
    questions: list[ParsedQuestion] = field(default_factory=list)

    def build(self) -> ParsedSection:
        return ParsedSection(
            title=self.title,
            description=self.description,
            questions=list(self.questions),
        )


@dataclass
class _ParseState:
    """Cursors for a single forward pass over the document lines."""

    title: str = ""
    description: str = ""
    sections: list[ParsedSection] = field(default_factory=list)
    section: _SectionBuilder | None = None
    question: _QuestionBuilder | None = None
    collecting_options: bool = False
    ignored_lines: int = 0

    def close_question(self) -> None:
        if self.question is not None and self.section is not None:
            self.section.questions.append(self.question.build())
        self.question = None

    def close_section(self) -> None:
        if self.section is not None:
            self.sections.append(self.section.build())
        self.section = None


class MarkdownSurveyParser(SurveyParser):
    """
    Line-oriented parser for the survey Markdown dialect.

    - "# " first occurrence is the title, later ones open sections
    - "## " describes the open section
    - "### " / "#### " / "##### " open single, multi and free-text questions
    - "$$$1-3 " opens a pick-three ranking question
    - "□ " lines are options of the open choice question
    """

    def __init__(
        self,
        config: ParserConfig = ParserConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._config = config
        self.metrics_hook = metrics_hook

    def parse(self, text: str) -> ParsedDocument:
        start = monotonic()
        state = _ParseState()

        lines = [line.strip() for line in text.removeprefix(_BOM).split("\n")]
        lines = [line for line in lines if line]
        logger.debug("Parsing survey markdown with %d non-empty lines", len(lines))

        for line_number, line in enumerate(lines, start=1):
            self._consume(state, line, line_number)

        document = self._finish(state)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.SURVEY_PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.SURVEY_SECTIONS_PARSED, len(document.sections)
        )
        self.metrics_hook.increment(
            names.SURVEY_QUESTIONS_PARSED, document.question_count
        )
        if state.ignored_lines:
            self.metrics_hook.increment(
                names.SURVEY_LINES_IGNORED, state.ignored_lines
            )
        logger.info(
            "Parsed survey %r: %d sections, %d questions",
            document.title,
            len(document.sections),
            document.question_count,
        )
        return document

    def _consume(self, state: _ParseState, line: str, line_number: int) -> None:
        if not state.title and line.startswith("# "):
            state.title = line[2:].strip()
            logger.debug("Line %d: title %r", line_number, state.title)
            return

        if line.startswith("# "):
            logger.debug("Line %d: section %r", line_number, line[2:].strip())
            state.close_question()
            state.close_section()
            state.section = _SectionBuilder(title=line[2:].strip())
            state.collecting_options = False
            return

        if line.startswith("## ") and state.section is not None:
            logger.debug("Line %d: section description", line_number)
            state.close_question()
            state.section.description = line[3:].strip()
            state.collecting_options = False
            return

        ranking = _RANKING_MARKER.match(line)
        if ranking:
            text = line[ranking.end() :].strip()
            self._open_question(state, QuestionKind.RANKING, text, line_number)
            return

        for marker, kind in _QUESTION_MARKERS:
            if line.startswith(marker):
                text = line[len(marker) :].strip()
                self._open_question(state, kind, text, line_number)
                return

        bullet = self._config.option_bullet
        if (
            line.startswith(f"{bullet} ")
            and state.question is not None
            and state.collecting_options
        ):
            state.question.options.append(line[len(bullet) + 1 :].strip())
            return

        if (
            self._config.other_keyword in line
            and state.question is not None
            and state.collecting_options
        ):
            logger.debug("Line %d: other option", line_number)
            state.question.options.append(self._config.other_option)
            return

        if (
            not state.description
            and state.section is None
            and not line.startswith("#")
            and not line.startswith(bullet)
        ):
            state.description = line
            logger.debug("Line %d: description", line_number)
            return

        logger.debug("Line %d: ignored %r", line_number, line)
        state.ignored_lines += 1

    def _open_question(
        self,
        state: _ParseState,
        kind: QuestionKind,
        text: str,
        line_number: int,
    ) -> None:
        logger.debug("Line %d: %s question %r", line_number, kind.value, text)
        state.close_question()
        if state.section is None:
            state.section = _SectionBuilder(title=self._config.default_section_title)
        state.question = _QuestionBuilder(text=text, kind=kind)
        state.collecting_options = kind.collects_options

    def _finish(self, state: _ParseState) -> ParsedDocument:
        orphan = state.question if state.section is None else None
        state.close_question()
        state.close_section()

        if not state.sections and orphan is not None:
            state.sections.append(
                ParsedSection(
                    title=self._config.default_section_title,
                    questions=[orphan.build()],
                )
            )

        return ParsedDocument(
            title=state.title or self._config.default_title,
            description=state.description or self._config.default_description,
            sections=state.sections,
        )


def parse_survey_markdown(
    text: str,
    *,
    config: ParserConfig = ParserConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ParsedDocument:
    """Parse survey Markdown with a one-off MarkdownSurveyParser."""
    return MarkdownSurveyParser(config=config, metrics_hook=metrics_hook).parse(text)
