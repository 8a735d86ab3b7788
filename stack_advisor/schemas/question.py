"""
StackAdvisor — Схема питання

Question — діагностичне питання з банку питань.
ScoringRule — іменована стратегія оцінки кандидата (замість довільної функції).
Правила обчислення для кожного ScoringKind зареєстровані в
stack_advisor.question_engine.scoring.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class QuestionType(str, Enum):
    """Тип питання"""
    BOOLEAN = "boolean"
    MULTIPLE = "multiple"


class ScoringKind(str, Enum):
    """Закритий набір стратегій оцінки"""
    ANY_TAG = "any_tag"              # 1.0 якщо є хоч один тег з tags
    HAS_TAG = "has_tag"              # 1.0 якщо є тег tags[0]
    NAME_CONTAINS = "name_contains"  # 1.0 якщо name (lower) містить підрядок
    CONSTANT = "constant"            # завжди value
    TAG_CHOICE = "tag_choice"        # для multiple: свій набір тегів на кожну відповідь


@dataclass(frozen=True)
class ScoringRule:
    """
    Параметризована стратегія оцінки.

    Приклад:
        ScoringRule(ScoringKind.ANY_TAG, tags=("react", "vue", "svelte"))
        ScoringRule(ScoringKind.TAG_CHOICE, choices=(("vercel",), ("aws", "gcp")))
    """
    kind: ScoringKind
    tags: Tuple[str, ...] = ()
    value: float = 0.5
    choices: Tuple[Tuple[str, ...], ...] = ()


@dataclass(frozen=True)
class Question:
    """
    Питання з банку питань.

    Для BOOLEAN: answers[0] — позитивна відповідь, answers[1] — негативна.
    """
    id: str
    text: str
    answers: Tuple[str, ...]
    scoring: ScoringRule
    type: QuestionType = QuestionType.BOOLEAN
    description: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "answers", tuple(self.answers))
        if not self.answers:
            raise ValueError(f"Question '{self.id}' has no answers")
        if self.type == QuestionType.BOOLEAN and len(self.answers) != 2:
            raise ValueError(
                f"Boolean question '{self.id}' must have exactly 2 answers, "
                f"got {len(self.answers)}"
            )
        if len(set(self.answers)) != len(self.answers):
            raise ValueError(f"Question '{self.id}' has duplicate answers")

    @property
    def positive_answer(self) -> str:
        return self.answers[0]

    @property
    def negative_answer(self) -> str:
        return self.answers[-1]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "description": self.description,
            "type": self.type.value,
            "answers": list(self.answers),
        }

    def __repr__(self) -> str:
        return f"Question('{self.id}', type={self.type.value})"
