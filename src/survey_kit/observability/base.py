# src/survey_kit/observability/base.py

from typing import Protocol


class MetricsHook(Protocol):
    """Sink for survey import metrics.

    The parser reports section, question and ignored-line counts. The
    normalizer labels its counter by ``question_type``. The importer counts
    successful imports and ``SurveyImportError`` failures, and the CSV
    exporter counts exported responses. Names come from
    ``survey_kit.observability.names``.

    The parser and normalizer never raise, so implementations should not
    raise either.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    """Default for every ``metrics_hook`` argument. Discards everything."""

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass
