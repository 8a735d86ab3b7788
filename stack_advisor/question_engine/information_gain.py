"""
StackAdvisor — Information Gain для вибору питань

Кандидати розбиваються на групи за очікуваною відповіддю на питання.

gain(q) = log2(n) - H(groups)

де:
- n = кількість кандидатів (log2(n) — ентропія рівномірного розподілу)
- H(groups) = Σ p_i * log2(1 / p_i), p_i = |group_i| / n

Для n <= 1 gain = 0 (log2(0) ніколи не обчислюється).
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import numpy as np

from stack_advisor.config import QuestionEngineConfig
from stack_advisor.schemas import Candidate, Question
from .scoring import expected_answer


logger = logging.getLogger(__name__)


@dataclass
class GainResult:
    """Результат обчислення gain для питання"""
    question_id: str
    gain: float
    n_candidates: int
    max_entropy: float = 0.0    # log2(n)
    split_entropy: float = 0.0  # H(groups)
    group_sizes: Dict[str, int] = field(default_factory=dict)

    def __repr__(self) -> str:
        return (
            f"GainResult(question='{self.question_id}', gain={self.gain:.4f}, "
            f"groups={self.group_sizes})"
        )


def entropy(counts: Sequence[int]) -> float:
    """
    Ентропія Шеннона (біти) розподілу за розмірами груп.

    Порожні групи нічого не додають.

    Args:
        counts: Розміри груп

    Returns:
        H = Σ p_i * log2(1 / p_i)
    """
    counts = np.asarray(counts, dtype=np.float64)
    counts = counts[counts > 0]
    total = counts.sum()
    if total <= 0:
        return 0.0
    probs = counts / total
    return float(np.sum(probs * np.log2(1.0 / probs)))


def partition(
    question: Question,
    candidates: Sequence[Candidate],
    positive_threshold: float = 0.5
) -> "OrderedDict[str, List[Candidate]]":
    """
    Розбити кандидатів на групи за очікуваною відповіддю.

    Ключі — відповіді в порядку оголошення; порожні групи присутні.
    """
    groups: "OrderedDict[str, List[Candidate]]" = OrderedDict(
        (answer, []) for answer in question.answers
    )
    for candidate in candidates:
        answer = expected_answer(question, candidate, positive_threshold)
        groups[answer].append(candidate)
    return groups


class InformationGainCalculator:
    """
    Калькулятор Information Gain.

    Приклад використання:
        calculator = InformationGainCalculator()

        result = calculator.compute(question, candidates)
        print(f"{result.question_id}: gain = {result.gain:.4f}")
    """

    def __init__(self, config: Optional[QuestionEngineConfig] = None):
        self.config = config or QuestionEngineConfig()

    @property
    def positive_threshold(self) -> float:
        return self.config.positive_threshold

    def compute(self, question: Question, candidates: Sequence[Candidate]) -> GainResult:
        """
        Обчислити gain для питання з деталями.

        Args:
            question: Питання для оцінки
            candidates: Поточні кандидати

        Returns:
            GainResult (gain >= 0)
        """
        n = len(candidates)

        if n <= 1:
            return GainResult(
                question_id=question.id,
                gain=0.0,
                n_candidates=n,
                group_sizes={a: 0 for a in question.answers} if n == 0 else {
                    expected_answer(question, candidates[0], self.positive_threshold): 1
                },
            )

        groups = partition(question, candidates, self.positive_threshold)
        group_sizes = {answer: len(members) for answer, members in groups.items()}

        max_entropy = float(np.log2(n))
        split_entropy = entropy(list(group_sizes.values()))

        return GainResult(
            question_id=question.id,
            gain=max(0.0, max_entropy - split_entropy),  # похибка округлення
            n_candidates=n,
            max_entropy=max_entropy,
            split_entropy=split_entropy,
            group_sizes=group_sizes,
        )

    def gain(self, question: Question, candidates: Sequence[Candidate]) -> float:
        """Тільки значення gain"""
        return self.compute(question, candidates).gain

    def compute_all(
        self,
        questions: Sequence[Question],
        candidates: Sequence[Candidate]
    ) -> List[GainResult]:
        """Gain для кожного питання, у вхідному порядку"""
        results = [self.compute(q, candidates) for q in questions]
        logger.debug(
            "Computed gain for %d questions over %d candidates",
            len(results), len(candidates)
        )
        return results

    def __repr__(self) -> str:
        return f"InformationGainCalculator(positive_threshold={self.positive_threshold})"
