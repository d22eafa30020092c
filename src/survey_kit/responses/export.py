# src/survey_kit/responses/export.py

import csv
import io
import logging
from collections.abc import Sequence
from datetime import date
from time import monotonic

from survey_kit.observability import names
from survey_kit.observability.base import MetricsHook, NoOpMetricsHook
from survey_kit.questions.models import NormalizedQuestion

from .models import Answer, SurveyResponse
from .validation import OTHER_KEYWORD

logger = logging.getLogger(__name__)

RESPONDENT_HEADERS = ["回答者名", "メールアドレス", "回答日時"]
UNKNOWN_NAME = "Unknown Monitor"
UNKNOWN_EMAIL = "unknown@example.com"
UNANSWERED = "未回答"
TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"
UTF8_BOM = "\ufeff"


def responses_to_csv(
    questions: Sequence[NormalizedQuestion],
    responses: Sequence[SurveyResponse],
    *,
    other_keyword: str = OTHER_KEYWORD,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> str:
    """Render responses as CSV, one row per respondent.

    Question columns follow ``order_index``. Returns an empty string when
    there are no responses.
    """
    if not responses:
        logger.debug("No responses, returning empty CSV")
        return ""

    start = monotonic()
    ordered = sorted(questions, key=lambda q: q.order_index)

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(RESPONDENT_HEADERS + [q.question_text for q in ordered])
    for response in responses:
        writer.writerow(
            [
                response.respondent_name or UNKNOWN_NAME,
                response.respondent_email or UNKNOWN_EMAIL,
                response.completed_at.strftime(TIMESTAMP_FORMAT),
            ]
            + [
                format_answer(
                    response.answer_for(q.order_index), other_keyword=other_keyword
                )
                for q in ordered
            ]
        )

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.RESPONSES_EXPORT_DURATION, elapsed_ms)
    metrics_hook.increment(names.RESPONSES_EXPORTED_TOTAL, len(responses))
    logger.info(
        "Exported %d responses across %d questions", len(responses), len(ordered)
    )
    return buffer.getvalue()


def format_answer(
    answer: Answer | None, *, other_keyword: str = OTHER_KEYWORD
) -> str:
    if answer is None:
        return UNANSWERED
    if answer.answer_text:
        return answer.answer_text
    if answer.answer_option:
        if answer.other_text:
            return f"{answer.answer_option} ({answer.other_text})"
        return answer.answer_option
    if answer.answer_options is not None:
        value = ", ".join(answer.answer_options)
        if answer.other_text:
            value += f" ({other_keyword}: {answer.other_text})"
        return value
    return UNANSWERED


def csv_filename(survey_title: str, on: date) -> str:
    return f"{survey_title}_responses_{on.isoformat()}.csv"


def encode_csv_for_download(text: str) -> bytes:
    """UTF-8 with a BOM so spreadsheet apps detect the encoding."""
    return (UTF8_BOM + text).encode("utf-8")
