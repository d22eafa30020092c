from .export import (
    csv_filename,
    encode_csv_for_download,
    format_answer,
    responses_to_csv,
)
from .models import Answer, SurveyResponse
from .validation import can_proceed, selection_limit

__all__ = [
    "Answer",
    "SurveyResponse",
    "can_proceed",
    "csv_filename",
    "encode_csv_for_download",
    "format_answer",
    "responses_to_csv",
    "selection_limit",
]
