"""
StackAdvisor — Scoring rules

Таблиця правил оцінки: ScoringKind → чиста функція (rule, candidate) → [0, 1].

Score — оцінка спорідненості кандидата з позитивною відповіддю питання.
Для multiple-питань додатково будується розподіл спорідненості по всіх
оголошених відповідях.

Класифікація кандидата (очікувана відповідь):
- BOOLEAN: answers[0] якщо score > threshold, інакше answers[1]
  (score рівно 0.5 → негативна відповідь)
- MULTIPLE: відповідь з максимальною спорідненістю; при рівності —
  перша оголошена відповідь
"""

from typing import Callable, Dict

import numpy as np

from stack_advisor.schemas import Candidate, Question, QuestionType, ScoringKind, ScoringRule


ScoringFn = Callable[[ScoringRule, Candidate], float]


def _any_tag(rule: ScoringRule, candidate: Candidate) -> float:
    return 1.0 if candidate.has_any_tag(rule.tags) else 0.0


def _has_tag(rule: ScoringRule, candidate: Candidate) -> float:
    if not rule.tags:
        return 0.0
    return 1.0 if candidate.has_tag(rule.tags[0]) else 0.0


def _name_contains(rule: ScoringRule, candidate: Candidate) -> float:
    name = candidate.name.lower()
    return 1.0 if any(part.lower() in name for part in rule.tags) else 0.0


def _constant(rule: ScoringRule, candidate: Candidate) -> float:
    return rule.value


def _tag_choice(rule: ScoringRule, candidate: Candidate) -> float:
    # Скаляр = спорідненість з першою відповіддю
    if not rule.choices:
        return 0.0
    return 1.0 if candidate.has_any_tag(rule.choices[0]) else 0.0


SCORING_TABLE: Dict[ScoringKind, ScoringFn] = {
    ScoringKind.ANY_TAG: _any_tag,
    ScoringKind.HAS_TAG: _has_tag,
    ScoringKind.NAME_CONTAINS: _name_contains,
    ScoringKind.CONSTANT: _constant,
    ScoringKind.TAG_CHOICE: _tag_choice,
}


def score(rule: ScoringRule, candidate: Candidate) -> float:
    """
    Оцінити кандидата за правилом.

    Returns:
        Спорідненість з позитивною відповіддю в [0, 1]
    """
    value = SCORING_TABLE[rule.kind](rule, candidate)
    return float(np.clip(value, 0.0, 1.0))


def answer_affinities(question: Question, candidate: Candidate) -> np.ndarray:
    """
    Розподіл спорідненості кандидата по відповідях питання.

    TAG_CHOICE: 1.0 для кожної відповіді, чиї теги є у кандидата.
    Інші правила: [s, 1 - s] для двох відповідей, або s для першої
    та (1 - s) рівномірно між рештою.
    """
    n_answers = len(question.answers)
    rule = question.scoring

    if rule.kind == ScoringKind.TAG_CHOICE:
        affinities = np.zeros(n_answers, dtype=np.float64)
        for i, tags in enumerate(rule.choices[:n_answers]):
            if candidate.has_any_tag(tags):
                affinities[i] = 1.0
        return affinities

    s = score(rule, candidate)
    if n_answers == 1:
        return np.array([s], dtype=np.float64)

    affinities = np.full(n_answers, (1.0 - s) / (n_answers - 1), dtype=np.float64)
    affinities[0] = s
    return affinities


def expected_answer(
    question: Question,
    candidate: Candidate,
    positive_threshold: float = 0.5
) -> str:
    """
    Очікувана відповідь кандидата на питання.

    Однакове правило використовується для обчислення gain і для фільтрації.
    """
    if question.type == QuestionType.BOOLEAN:
        if score(question.scoring, candidate) > positive_threshold:
            return question.answers[0]
        return question.answers[1]

    # np.argmax повертає перший індекс серед рівних
    idx = int(np.argmax(answer_affinities(question, candidate)))
    return question.answers[idx]
