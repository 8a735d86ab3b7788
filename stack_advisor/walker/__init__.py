"""
StackAdvisor — Модуль Walker

Контролер однієї адаптивної сесії рекомендації.

Приклад використання:
    from stack_advisor.walker import StackWalker, SessionStatus

    walker = StackWalker(candidates)
    question = walker.next_question()
    walker.record_answer(question.id, "Yes")

    state = walker.current_state()
    if state.status == SessionStatus.FOUND:
        print(walker.final_recommendation().name)
"""

from .session import (
    StackWalker,
    SessionStatus,
    HistoryEntry,
    WalkerState,
)


__all__ = [
    "StackWalker",
    "SessionStatus",
    "HistoryEntry",
    "WalkerState",
]
