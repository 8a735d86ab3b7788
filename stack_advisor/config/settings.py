"""
StackAdvisor — Налаштування системи

Всі параметри зібрані в dataclass-и для:
- Типізації
- Легкого доступу через config.question_engine.positive_threshold
- Серіалізації в YAML
"""

from dataclasses import dataclass, field
from typing import Optional


# =============================================================================
# QUESTION ENGINE CONFIGURATION
# =============================================================================

@dataclass
class QuestionEngineConfig:
    """Параметри механізму питань"""

    # Score строго більший за поріг → позитивна відповідь (0.5 → негативна)
    positive_threshold: float = 0.5


# =============================================================================
# CATALOG CONFIGURATION
# =============================================================================

@dataclass
class CatalogConfig:
    """Параметри джерела каталогу"""

    # None → вбудоване дерево stack_advisor/data/tree.json
    tree_path: Optional[str] = None
    validate_on_load: bool = True


# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

@dataclass
class StackAdvisorConfig:
    """
    Головна конфігурація StackAdvisor

    Приклад використання:
        config = StackAdvisorConfig()
        print(config.question_engine.positive_threshold)  # 0.5
    """

    # Метадані
    version: str = "1.0.0"
    project_name: str = "StackAdvisor"

    # Компоненти
    question_engine: QuestionEngineConfig = field(default_factory=QuestionEngineConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)

    # Логування
    log_level: str = "INFO"


def get_default_config() -> StackAdvisorConfig:
    """Отримати конфігурацію за замовчуванням"""
    return StackAdvisorConfig()
