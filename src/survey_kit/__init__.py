# Importing
from .importing import (
    SurveyImportError,
    SurveyImportPreview,
    UnsupportedFileTypeError,
    import_survey_file,
    import_survey_text,
)

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    MarkdownSurveyParser,
    ParsedDocument,
    ParsedQuestion,
    ParsedSection,
    ParserConfig,
    QuestionKind,
    parse_survey_markdown,
)

# Questions
from .questions import NormalizedQuestion, normalize_questions

# Responses
from .responses import Answer, SurveyResponse, can_proceed, responses_to_csv

__all__ = [
    # Importing
    "SurveyImportError",
    "SurveyImportPreview",
    "UnsupportedFileTypeError",
    "import_survey_file",
    "import_survey_text",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "MarkdownSurveyParser",
    "ParsedDocument",
    "ParsedQuestion",
    "ParsedSection",
    "ParserConfig",
    "QuestionKind",
    "parse_survey_markdown",
    # Questions
    "NormalizedQuestion",
    "normalize_questions",
    # Responses
    "Answer",
    "SurveyResponse",
    "can_proceed",
    "responses_to_csv",
]
