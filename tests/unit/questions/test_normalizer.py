from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from survey_kit.observability import names
from survey_kit.parsers.markdown_parser import parse_survey_markdown
from survey_kit.parsers.models import (
    ParsedDocument,
    ParsedQuestion,
    ParsedSection,
    QuestionKind,
)
from survey_kit.questions.models import NormalizedQuestion
from survey_kit.questions.normalizer import normalize_questions


def _document(*sections: ParsedSection) -> ParsedDocument:
    return ParsedDocument(title="T", description="D", sections=list(sections))


class TestNormalizeQuestions:
    def test_empty_document_yields_no_questions(self) -> None:
        assert normalize_questions(_document()) == []

    def test_order_index_spans_sections(self, sectioned_survey: str) -> None:
        """order_index is one counter across all sections, not reset per section."""
        questions = normalize_questions(parse_survey_markdown(sectioned_survey))

        assert [q.order_index for q in questions] == [0, 1, 2, 3]
        assert [q.section_title for q in questions] == [
            "About you",
            "About you",
            "Your experience",
            "Your experience",
        ]

    def test_section_metadata_copied_to_each_question(self) -> None:
        doc = _document(
            ParsedSection(
                title="S",
                description="About S",
                questions=[
                    ParsedQuestion(text="Q1", kind=QuestionKind.TEXT),
                    ParsedQuestion(text="Q2", kind=QuestionKind.TEXT),
                ],
            )
        )

        questions = normalize_questions(doc)

        assert all(q.section_title == "S" for q in questions)
        assert all(q.section_description == "About S" for q in questions)

    @pytest.mark.parametrize(
        ("kind", "question_type", "is_multiple_select", "max_selections"),
        [
            (QuestionKind.TEXT, "text", False, None),
            (QuestionKind.SINGLE_CHOICE, "multiple_choice", False, None),
            (QuestionKind.MULTI_CHOICE, "multiple_choice", True, None),
            (QuestionKind.RANKING, "multiple_choice", True, 3),
        ],
    )
    def test_kind_mapping(
        self,
        kind: QuestionKind,
        question_type: str,
        is_multiple_select: bool,
        max_selections: int | None,
    ) -> None:
        doc = _document(
            ParsedSection(title="S", questions=[ParsedQuestion(text="Q", kind=kind)])
        )

        (question,) = normalize_questions(doc)

        assert question.question_type == question_type
        assert question.is_multiple_select is is_multiple_select
        assert question.max_selections == max_selections

    def test_ranking_limit_ignores_option_count(self) -> None:
        options = "\n".join(f"□ {n}" for n in range(5))
        questions = normalize_questions(
            parse_survey_markdown(f"$$$1-3 First\n{options}\n$$$1-3 Second\n{options}")
        )

        assert [q.order_index for q in questions] == [0, 1]
        assert all(q.is_multiple_select for q in questions)
        assert all(q.max_selections == 3 for q in questions)

    def test_options_copied_in_order(self) -> None:
        questions = normalize_questions(
            parse_survey_markdown("# T\n### Q1\n□ A\n□ B")
        )

        assert len(questions) == 1
        assert questions[0].question_text == "Q1"
        assert questions[0].options == ["A", "B"]
        assert questions[0].order_index == 0
        assert questions[0].required is True

    def test_shopping_survey(self, shopping_survey: str) -> None:
        questions = normalize_questions(parse_survey_markdown(shopping_survey))

        assert [q.order_index for q in questions] == list(range(6))
        assert [len(q.options) for q in questions] == [5, 7, 6, 0, 0, 5]
        rankings = [q for q in questions if q.max_selections == 3]
        assert len(rankings) == 2

    def test_normalization_is_deterministic(self, shopping_survey: str) -> None:
        first = normalize_questions(parse_survey_markdown(shopping_survey))
        second = normalize_questions(parse_survey_markdown(shopping_survey))

        assert first == second

    def test_records_metrics_per_question_type(self, sectioned_survey: str) -> None:
        metrics_hook = Mock()

        normalize_questions(
            parse_survey_markdown(sectioned_survey), metrics_hook=metrics_hook
        )

        metrics_hook.record_latency.assert_called_once()
        assert metrics_hook.increment.call_args_list[0].args == (
            names.QUESTIONS_NORMALIZED_TOTAL,
            3,
        )
        assert metrics_hook.increment.call_args_list[0].kwargs == {
            "labels": {"question_type": "multiple_choice"}
        }
        assert metrics_hook.increment.call_args_list[1].kwargs == {
            "labels": {"question_type": "text"}
        }


class TestNormalizedQuestion:
    def _question(self) -> NormalizedQuestion:
        return NormalizedQuestion(
            question_text="Q",
            question_type="multiple_choice",
            options=["A", "B", "C"],
            required=True,
            order_index=4,
            is_multiple_select=True,
            max_selections=3,
            section_title="S",
        )

    def test_to_row(self) -> None:
        row = self._question().to_row("survey-1")

        assert row == {
            "survey_id": "survey-1",
            "question_text": "Q",
            "question_type": "multiple_choice",
            "options": ["A", "B", "C"],
            "required": True,
            "order_index": 4,
            "is_multiple_select": True,
            "max_selections": 3,
        }

    def test_is_frozen(self) -> None:
        question = self._question()

        with pytest.raises(ValidationError):
            question.question_text = "changed"  # type: ignore

    def test_rejects_unknown_question_type(self) -> None:
        with pytest.raises(ValidationError):
            NormalizedQuestion(
                question_text="Q",
                question_type="ranking",  # type: ignore
                options=[],
                required=True,
                order_index=0,
                is_multiple_select=False,
                section_title="S",
            )

    def test_rejects_extra_fields(self) -> None:
        with pytest.raises(ValidationError):
            NormalizedQuestion(
                question_text="Q",
                question_type="text",
                options=[],
                required=True,
                order_index=0,
                is_multiple_select=False,
                section_title="S",
                is_long_text=True,  # type: ignore
            )
