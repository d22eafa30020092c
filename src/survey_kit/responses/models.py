from datetime import datetime

from pydantic import BaseModel, Field


class Answer(BaseModel):
    """A monitor's answer to one question, addressed by its order_index."""

    order_index: int
    answer_text: str | None = None
    answer_option: str | None = None
    answer_options: list[str] | None = None
    other_text: str | None = None

    class Config:
        extra = "forbid"


class SurveyResponse(BaseModel):
    respondent_name: str | None = None
    respondent_email: str | None = None
    completed_at: datetime
    answers: list[Answer] = Field(default_factory=list)

    class Config:
        extra = "forbid"

    def answer_for(self, order_index: int) -> Answer | None:
        for answer in self.answers:
            if answer.order_index == order_index:
                return answer
        return None
