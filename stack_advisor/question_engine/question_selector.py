"""
StackAdvisor — Question Selector

Вибір найкращого наступного питання на основі gain.

Жадібний вибір на кожному кроці: серед незаданих питань — питання
з максимальним gain; при рівності — перше в порядку банку.
"""

import logging
import math
from typing import Iterable, List, Optional, Sequence, Set

from stack_advisor.config import QuestionEngineConfig
from stack_advisor.schemas import Candidate, Question
from .information_gain import InformationGainCalculator, GainResult
from .question_bank import QuestionBank


logger = logging.getLogger(__name__)


def minimum_questions(n_candidates: int) -> int:
    """Теоретичний мінімум бінарних питань для n кандидатів: ceil(log2(n))"""
    if n_candidates <= 1:
        return 0
    return math.ceil(math.log2(n_candidates))


class QuestionSelector:
    """
    Вибір найкращого питання.

    Приклад використання:
        selector = QuestionSelector(QuestionBank())

        question = selector.select_best(candidates, asked_ids={"needs_auth"})
        if question:
            print(question.text)
    """

    def __init__(
        self,
        question_bank: Optional[QuestionBank] = None,
        gain_calculator: Optional[InformationGainCalculator] = None,
        config: Optional[QuestionEngineConfig] = None
    ):
        self.config = config or QuestionEngineConfig()
        self.question_bank = question_bank or QuestionBank()
        self.gain_calculator = gain_calculator or InformationGainCalculator(self.config)

    def select_best(
        self,
        candidates: Sequence[Candidate],
        asked_ids: Optional[Iterable[str]] = None
    ) -> Optional[Question]:
        """
        Вибрати найкраще питання.

        Args:
            candidates: Поточні кандидати
            asked_ids: Id вже заданих питань

        Returns:
            Question або None (кандидатів <= 1 або банк вичерпано)
        """
        if len(candidates) <= 1:
            return None

        asked: Set[str] = set(asked_ids or ())
        pending = self.question_bank.unasked(asked)

        if not pending:
            logger.debug("Question bank exhausted with %d candidates left", len(candidates))
            return None

        best_question = None
        best_gain = -1.0

        for question in pending:
            current = self.gain_calculator.gain(question, candidates)
            # Строго більше → перше питання виграє при рівності
            if current > best_gain:
                best_gain = current
                best_question = question

        if best_question is not None:
            logger.debug("Selected '%s' (gain=%.4f)", best_question.id, best_gain)

        return best_question

    def rank_questions(
        self,
        candidates: Sequence[Candidate],
        asked_ids: Optional[Iterable[str]] = None,
        top_k: Optional[int] = None
    ) -> List[GainResult]:
        """
        Gain для всіх незаданих питань, відсортовано за спаданням.

        Сортування стабільне: при рівності зберігається порядок банку.
        """
        asked = set(asked_ids or ())
        pending = self.question_bank.unasked(asked)

        results = self.gain_calculator.compute_all(pending, candidates)
        results.sort(key=lambda r: r.gain, reverse=True)

        if top_k:
            results = results[:top_k]

        return results

    def __repr__(self) -> str:
        return (
            f"QuestionSelector(\n"
            f"  {self.question_bank},\n"
            f"  {self.gain_calculator}\n"
            f")"
        )
