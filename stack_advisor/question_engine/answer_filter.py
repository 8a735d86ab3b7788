"""
StackAdvisor — Answer Filter

Звуження набору кандидатів за відповіддю користувача.

Кандидат залишається, якщо його очікувана відповідь точно збігається
з наданою (з урахуванням регістру, без trim). Відповідь поза оголошеним
списком → порожній результат.
"""

import logging
from typing import Optional, Sequence, Tuple

from stack_advisor.config import QuestionEngineConfig
from stack_advisor.schemas import Candidate, Question
from .scoring import expected_answer


logger = logging.getLogger(__name__)


class AnswerFilter:
    """
    Фільтр кандидатів за відповіддю.

    Приклад використання:
        answer_filter = AnswerFilter()
        remaining = answer_filter.apply(candidates, question, "Yes")
    """

    def __init__(self, config: Optional[QuestionEngineConfig] = None):
        self.config = config or QuestionEngineConfig()

    def apply(
        self,
        candidates: Sequence[Candidate],
        question: Question,
        answer: str
    ) -> Tuple[Candidate, ...]:
        """
        Відфільтрувати кандидатів.

        Args:
            candidates: Поточні кандидати (не змінюються)
            question: Питання
            answer: Відповідь користувача

        Returns:
            Новий кортеж кандидатів, сумісних з відповіддю
        """
        if answer not in question.answers:
            logger.warning(
                "Answer %r is not declared for question '%s'; no candidate matches",
                answer, question.id
            )

        threshold = self.config.positive_threshold
        return tuple(
            c for c in candidates
            if expected_answer(question, c, threshold) == answer
        )

    def __repr__(self) -> str:
        return f"AnswerFilter(positive_threshold={self.config.positive_threshold})"
