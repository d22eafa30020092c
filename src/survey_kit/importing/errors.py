class SurveyImportError(ValueError):
    """The survey text could not be turned into questions."""


class UnsupportedFileTypeError(SurveyImportError):
    """Only Markdown (.md) and plain text (.txt) files can be imported."""
