"""
StackAdvisor — Walker (контролер сесії)

StackWalker зберігає стан однієї сесії рекомендації:
- Поточних кандидатів (кількість тільки зменшується)
- Id заданих питань (тільки зростає)
- Хронологічну історію відповідей

Цикл:
    question = walker.next_question()   → показати користувачу
    walker.record_answer(question.id, answer)
    ... поки next_question() не поверне None

Стани:
- ACTIVE: кандидатів > 1 і є незадане питання
- FOUND: рівно один кандидат
- EMPTY: жодного кандидата (відповідь відфільтрувала всіх)
- EXHAUSTED: кандидатів > 1, але питання закінчились
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Set, Tuple

from stack_advisor.catalog import CatalogSource, extract_candidates, load_tree
from stack_advisor.config import QuestionEngineConfig
from stack_advisor.question_engine import AnswerFilter, QuestionBank, QuestionSelector
from stack_advisor.schemas import Candidate, Question


logger = logging.getLogger(__name__)


class SessionStatus(str, Enum):
    """Статус сесії"""
    ACTIVE = "active"
    FOUND = "found"
    EMPTY = "empty"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class HistoryEntry:
    """Запис питання-відповідь"""
    question_id: str
    answer: str
    candidates_remaining: int

    def to_dict(self) -> dict:
        return {
            "question_id": self.question_id,
            "answer": self.answer,
            "candidates_remaining": self.candidates_remaining,
        }


@dataclass(frozen=True)
class WalkerState:
    """Знімок стану сесії тільки для читання"""
    remaining_candidates: Tuple[Candidate, ...]
    remaining_count: int
    asked_count: int
    history: Tuple[HistoryEntry, ...]
    status: SessionStatus

    @property
    def is_complete(self) -> bool:
        """Залишилось <= 1 кандидата"""
        return self.remaining_count <= 1

    @property
    def is_found(self) -> bool:
        """Залишився рівно один кандидат"""
        return self.remaining_count == 1

    def to_dict(self) -> dict:
        return {
            "remaining_candidates": [c.to_dict() for c in self.remaining_candidates],
            "remaining_count": self.remaining_count,
            "asked_count": self.asked_count,
            "history": [h.to_dict() for h in self.history],
            "is_complete": self.is_complete,
            "is_found": self.is_found,
            "status": self.status.value,
        }


class StackWalker:
    """
    Контролер адаптивної сесії.

    Один екземпляр — одна сесія одного користувача. Не розрахований
    на одночасні зміни з кількох потоків.

    Приклад використання:
        walker = StackWalker.from_tree_file("data/tree.json")

        question = walker.next_question()
        while question is not None:
            walker.record_answer(question.id, ask_user(question))
            question = walker.next_question()

        stack = walker.final_recommendation()
    """

    def __init__(
        self,
        candidates: Sequence[Candidate],
        question_bank: Optional[QuestionBank] = None,
        config: Optional[QuestionEngineConfig] = None
    ):
        """
        Args:
            candidates: Повний каталог кандидатів
            question_bank: Банк питань (None → питання за замовчуванням)
            config: Параметри механізму питань
        """
        self.config = config or QuestionEngineConfig()
        self.question_bank = question_bank or QuestionBank()
        self.selector = QuestionSelector(self.question_bank, config=self.config)
        self.answer_filter = AnswerFilter(self.config)

        self._all_candidates: Tuple[Candidate, ...] = tuple(candidates)
        self._remaining: Tuple[Candidate, ...] = self._all_candidates
        self._asked_ids: Set[str] = set()
        self._history: List[HistoryEntry] = []

    @classmethod
    def from_tree(cls, tree: Dict[str, dict], **kwargs) -> "StackWalker":
        """Створити з дерева рішень"""
        return cls(extract_candidates(tree), **kwargs)

    @classmethod
    def from_tree_file(cls, path: str, **kwargs) -> "StackWalker":
        """Створити з JSON файлу дерева"""
        return cls.from_tree(load_tree(path), **kwargs)

    @classmethod
    def from_catalog(cls, source: CatalogSource, **kwargs) -> "StackWalker":
        """Створити з CatalogSource"""
        return cls(source.candidates, **kwargs)

    # =========================================================================
    # Операції сесії
    # =========================================================================

    def next_question(self) -> Optional[Question]:
        """Наступне питання або None (сесію завершено)"""
        return self.selector.select_best(self._remaining, self._asked_ids)

    def record_answer(self, question_id: str, answer: str) -> bool:
        """
        Записати відповідь та звузити кандидатів.

        Невідомий або вже заданий question_id — нічого не змінює.

        Args:
            question_id: Id питання з банку
            answer: Відповідь (одна з question.answers)

        Returns:
            True якщо відповідь застосовано
        """
        question = self.question_bank.get(question_id)
        if question is None:
            logger.warning("Unknown question id '%s'; answer ignored", question_id)
            return False

        if question_id in self._asked_ids:
            logger.warning("Question '%s' was already answered; answer ignored", question_id)
            return False

        before = len(self._remaining)

        self._asked_ids.add(question_id)
        self._remaining = self.answer_filter.apply(self._remaining, question, answer)
        self._history.append(HistoryEntry(
            question_id=question_id,
            answer=answer,
            candidates_remaining=len(self._remaining),
        ))

        logger.info(
            "Answer '%s' → '%s': %d → %d candidates",
            question_id, answer, before, len(self._remaining)
        )
        return True

    @property
    def status(self) -> SessionStatus:
        n = len(self._remaining)
        if n == 0:
            return SessionStatus.EMPTY
        if n == 1:
            return SessionStatus.FOUND
        if not self.question_bank.unasked(self._asked_ids):
            return SessionStatus.EXHAUSTED
        return SessionStatus.ACTIVE

    def current_state(self) -> WalkerState:
        """Знімок поточного стану"""
        return WalkerState(
            remaining_candidates=self._remaining,
            remaining_count=len(self._remaining),
            asked_count=len(self._asked_ids),
            history=tuple(self._history),
            status=self.status,
        )

    def final_recommendation(self) -> Optional[Candidate]:
        """Єдиний кандидат, що залишився, або None"""
        if len(self._remaining) == 1:
            return self._remaining[0]
        return None

    def reset(self) -> None:
        """Повернути сесію до початкового стану"""
        self._remaining = self._all_candidates
        self._asked_ids = set()
        self._history = []

    def path_summary(self) -> List[str]:
        """Історія у вигляді 'питання → відповідь'"""
        lines = []
        for entry in self._history:
            question = self.question_bank.get(entry.question_id)
            if question is None:
                continue
            lines.append(f"{question.text} → {entry.answer}")
        return lines

    # =========================================================================
    # Властивості
    # =========================================================================

    @property
    def all_candidates(self) -> Tuple[Candidate, ...]:
        return self._all_candidates

    @property
    def remaining_candidates(self) -> Tuple[Candidate, ...]:
        return self._remaining

    @property
    def asked_question_ids(self) -> Set[str]:
        return set(self._asked_ids)

    @property
    def history(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._history)

    def __repr__(self) -> str:
        return (
            f"StackWalker(candidates={len(self._all_candidates)}, "
            f"remaining={len(self._remaining)}, asked={len(self._asked_ids)}, "
            f"status={self.status.value})"
        )
