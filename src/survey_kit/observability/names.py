# src/survey_kit/observability/names.py

"""Standard metric names for survey-kit observability.

Use these constants instead of hardcoded strings.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parser Metrics
# ============================================================================

# Duration
SURVEY_PARSE_DURATION = "survey_parse_duration"

# Counters
SURVEY_SECTIONS_PARSED = "survey_sections_parsed"
SURVEY_QUESTIONS_PARSED = "survey_questions_parsed"
SURVEY_LINES_IGNORED = "survey_lines_ignored"


# ============================================================================
# Normalizer Metrics
# ============================================================================

# Duration
QUESTIONS_NORMALIZE_DURATION = "questions_normalize_duration"

# Counters (labelled by question_type)
QUESTIONS_NORMALIZED_TOTAL = "questions_normalized_total"


# ============================================================================
# Import Metrics
# ============================================================================

# Duration
SURVEY_IMPORT_DURATION = "survey_import_duration"

# Counters
SURVEY_IMPORTS_TOTAL = "survey_imports_total"
SURVEY_IMPORT_ERRORS_TOTAL = "survey_import_errors_total"


# ============================================================================
# Export Metrics
# ============================================================================

# Duration
RESPONSES_EXPORT_DURATION = "responses_export_duration"

# Counters
RESPONSES_EXPORTED_TOTAL = "responses_exported_total"
