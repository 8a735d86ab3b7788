"""
StackAdvisor — Модуль каталогу

Витягує каталог кандидатів із дерева рішень (JSON).

Приклад використання:
    from stack_advisor.catalog import CatalogSource

    source = CatalogSource("data/tree.json")
    print(len(source.candidates))
"""

from .tree import (
    CatalogSource,
    TreeValidation,
    load_tree,
    extract_candidates,
    validate_tree,
    DEFAULT_TREE_PATH,
)


__all__ = [
    "CatalogSource",
    "TreeValidation",
    "load_tree",
    "extract_candidates",
    "validate_tree",
    "DEFAULT_TREE_PATH",
]
