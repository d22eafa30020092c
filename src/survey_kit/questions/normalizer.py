# src/survey_kit/questions/normalizer.py

"""Flatten parsed sections into the persisted question schema.

Only two physical question types exist in storage. Multi-choice and ranking
are told apart from single choice by ``is_multiple_select``, and ranking from
unrestricted multi-choice by ``max_selections``.
"""

import logging
from collections import Counter
from time import monotonic

from survey_kit.observability import names
from survey_kit.observability.base import MetricsHook, NoOpMetricsHook
from survey_kit.parsers.models import (
    RANKING_SELECTIONS,
    ParsedDocument,
    ParsedQuestion,
    QuestionKind,
)

from .models import NormalizedQuestion, QuestionType

logger = logging.getLogger(__name__)

# kind -> (question_type, is_multiple_select, max_selections)
_KIND_MAPPING: dict[QuestionKind, tuple[QuestionType, bool, int | None]] = {
    QuestionKind.TEXT: ("text", False, None),
    QuestionKind.SINGLE_CHOICE: ("multiple_choice", False, None),
    QuestionKind.MULTI_CHOICE: ("multiple_choice", True, None),
    QuestionKind.RANKING: ("multiple_choice", True, RANKING_SELECTIONS),
}


def normalize_questions(
    document: ParsedDocument,
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[NormalizedQuestion]:
    """Map every parsed question to a NormalizedQuestion.

    Args:
        document: Parser output.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Questions in document order. ``order_index`` runs from 0 across all
        sections without resetting.
    """
    start = monotonic()
    questions: list[NormalizedQuestion] = []

    for section in document.sections:
        for question in section.questions:
            questions.append(
                _normalize_question(
                    question,
                    order_index=len(questions),
                    section_title=section.title,
                    section_description=section.description,
                )
            )

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.QUESTIONS_NORMALIZE_DURATION, elapsed_ms)
    by_type = Counter(q.question_type for q in questions)
    for question_type, count in sorted(by_type.items()):
        metrics_hook.increment(
            names.QUESTIONS_NORMALIZED_TOTAL,
            count,
            labels={"question_type": question_type},
        )
    logger.debug("Normalized %d questions", len(questions))
    return questions


def _normalize_question(
    question: ParsedQuestion,
    *,
    order_index: int,
    section_title: str,
    section_description: str | None,
) -> NormalizedQuestion:
    question_type, is_multiple_select, max_selections = _KIND_MAPPING[question.kind]
    return NormalizedQuestion(
        question_text=question.text,
        question_type=question_type,
        options=list(question.options),
        required=question.required,
        order_index=order_index,
        is_multiple_select=is_multiple_select,
        max_selections=max_selections,
        section_title=section_title,
        section_description=section_description,
    )
