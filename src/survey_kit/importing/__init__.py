from .errors import SurveyImportError, UnsupportedFileTypeError
from .importer import (
    SUPPORTED_SUFFIXES,
    SurveyImportPreview,
    import_survey_file,
    import_survey_text,
)

__all__ = [
    "SUPPORTED_SUFFIXES",
    "SurveyImportError",
    "SurveyImportPreview",
    "UnsupportedFileTypeError",
    "import_survey_file",
    "import_survey_text",
]
