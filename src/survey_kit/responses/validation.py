# src/survey_kit/responses/validation.py

"""Answer completeness rules applied before a monitor moves to the next question."""

from survey_kit.parsers.config import ParserConfig
from survey_kit.questions.models import NormalizedQuestion

from .models import Answer

OTHER_KEYWORD = ParserConfig.other_keyword


def selection_limit(question: NormalizedQuestion) -> int | None:
    """Number of options a monitor must pick, or None when unrestricted."""
    if not question.is_multiple_select:
        return None
    return question.max_selections


def can_proceed(
    question: NormalizedQuestion,
    answer: Answer | None,
    *,
    other_keyword: str = OTHER_KEYWORD,
) -> bool:
    """Return whether ``answer`` is complete enough for ``question``.

    - Optional questions always pass.
    - Picking an "other" option requires the free-text ``other_text``.
    - Ranking questions need exactly ``max_selections`` options.
    - Other multi-select questions need at least one option.
    - Everything else needs a text answer or a single option.
    """
    if not question.required:
        return True
    if answer is None:
        return False

    if question.question_type == "multiple_choice" and not answer.other_text:
        if question.is_multiple_select:
            picked_other = any(
                other_keyword in option for option in answer.answer_options or []
            )
        else:
            picked_other = other_keyword in (answer.answer_option or "")
        if picked_other:
            return False

    if question.is_multiple_select:
        selected = len(answer.answer_options or [])
        limit = selection_limit(question)
        if limit is not None:
            return selected == limit
        return selected > 0

    return bool(answer.answer_text or answer.answer_option)
