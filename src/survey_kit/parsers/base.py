# parsers/base.py

from abc import ABC, abstractmethod

from .models import ParsedDocument


class SurveyParser(ABC):
    @abstractmethod
    def parse(self, text: str) -> ParsedDocument:
        """
        Parse a survey document into sections of typed questions.

        Requirements:
        - Deterministic output for same input
        - Never raises on text input; unknown lines are skipped
        - Sections and questions keep document order
        """
        raise NotImplementedError
