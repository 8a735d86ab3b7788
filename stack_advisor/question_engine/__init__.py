"""
StackAdvisor — Модуль Question Engine

Адаптивний вибір питань для звуження набору кандидатів.

gain(q) = log2(n) - H(groups)

Компоненти:
- scoring: Таблиця правил оцінки кандидатів (ScoringKind → функція)
- QuestionBank: Фіксований впорядкований банк питань
- InformationGainCalculator: Обчислення gain питання
- QuestionSelector: Вибір найкращого питання
- AnswerFilter: Фільтрація кандидатів за відповіддю

Приклад використання:
    from stack_advisor.question_engine import QuestionSelector, AnswerFilter

    selector = QuestionSelector()
    question = selector.select_best(candidates, asked_ids=set())

    if question:
        print(f"Питання: {question.text}")
        candidates = AnswerFilter().apply(candidates, question, question.answers[0])
"""

from .scoring import (
    SCORING_TABLE,
    score,
    answer_affinities,
    expected_answer,
)

from .question_bank import (
    QuestionBank,
    DEFAULT_QUESTIONS,
)

from .information_gain import (
    InformationGainCalculator,
    GainResult,
    entropy,
    partition,
)

from .question_selector import (
    QuestionSelector,
    minimum_questions,
)

from .answer_filter import AnswerFilter


__all__ = [
    # Scoring
    "SCORING_TABLE",
    "score",
    "answer_affinities",
    "expected_answer",

    # Question Bank
    "QuestionBank",
    "DEFAULT_QUESTIONS",

    # Information Gain
    "InformationGainCalculator",
    "GainResult",
    "entropy",
    "partition",

    # Question Selector
    "QuestionSelector",
    "minimum_questions",

    # Answer Filter
    "AnswerFilter",
]
