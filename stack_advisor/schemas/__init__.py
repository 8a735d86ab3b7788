"""
StackAdvisor — Модуль схем даних (schemas)

Компоненти:
- candidate.py: Candidate
- question.py: Question, QuestionType, ScoringKind, ScoringRule

Приклад використання:
    from stack_advisor.schemas import Candidate, Question, ScoringRule, ScoringKind

    stack = Candidate(name="Django", tags=("backend", "python", "django"))

    question = Question(
        id="batteries_included",
        text="Do you prefer a batteries-included framework?",
        answers=("Yes", "No"),
        scoring=ScoringRule(ScoringKind.ANY_TAG, tags=("django", "rails")),
    )
"""

from .candidate import Candidate
from .question import Question, QuestionType, ScoringKind, ScoringRule


__all__ = [
    "Candidate",
    "Question",
    "QuestionType",
    "ScoringKind",
    "ScoringRule",
]
