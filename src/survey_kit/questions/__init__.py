from .models import NormalizedQuestion, QuestionType
from .normalizer import normalize_questions

__all__ = [
    "NormalizedQuestion",
    "QuestionType",
    "normalize_questions",
]
