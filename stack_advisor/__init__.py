"""
StackAdvisor — Адаптивна рекомендація tech stack

Архітектура: каталог кандидатів + жадібний вибір питань за information gain

Модулі:
- config: Конфігурація системи
- schemas: Candidate, Question, ScoringRule
- catalog: Каталог кандидатів з дерева рішень
- question_engine: Банк питань, gain, вибір питання, фільтр відповідей
- walker: Контролер сесії
- api: Backend API
"""

__version__ = "1.0.0"
__author__ = "Oleksii Bychkov"

from .config import StackAdvisorConfig, get_default_config
