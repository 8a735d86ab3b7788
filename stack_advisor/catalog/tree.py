"""
StackAdvisor — Дерево рішень як джерело каталогу

Дерево — JSON-об'єкт {node_id: node}, де node:
    {
        "id": "start",
        "question": "...",                       # нетермінальний вузол
        "options": [{"text": "...", "nextId": "..."}],
        "result": {"name": ..., "description": ..., "url": ..., "tags": [...]}
    }

Каталог кандидатів = result усіх термінальних вузлів у порядку документа.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from stack_advisor.schemas import Candidate


logger = logging.getLogger(__name__)

MAX_OPTIONS = 10
DEFAULT_TREE_PATH = Path(__file__).parent.parent / "data" / "tree.json"


@dataclass
class TreeValidation:
    """Результат перевірки структури дерева"""
    valid: bool
    errors: List[str] = field(default_factory=list)


def load_tree(path: str) -> Dict[str, dict]:
    """
    Завантажити дерево з JSON файлу.

    Raises:
        ValueError: якщо корінь документа не є об'єктом
    """
    with open(path, "r", encoding="utf-8") as f:
        tree = json.load(f)

    if not isinstance(tree, dict):
        raise ValueError(f"Tree file {path} must contain a JSON object")

    return tree


def extract_candidates(tree: Dict[str, dict]) -> Tuple[Candidate, ...]:
    """
    Зібрати кандидатів з термінальних вузлів.

    Дублікати за name відкидаються (перший виграє).
    """
    candidates = []
    seen = set()

    for node_id, node in tree.items():
        result = node.get("result")
        if not result:
            continue

        candidate = Candidate.from_dict(result)
        if candidate.name in seen:
            logger.debug("Skipping duplicate result '%s' in node '%s'", candidate.name, node_id)
            continue

        seen.add(candidate.name)
        candidates.append(candidate)

    return tuple(candidates)


def validate_tree(tree: Dict[str, dict]) -> TreeValidation:
    """
    Перевірити структуру дерева.

    Перевірки:
    - наявність вузла "start"
    - кожен вузол має question або result
    - нетермінальні вузли мають options, термінальні — не мають
    - не більше MAX_OPTIONS варіантів, кожен з text та nextId
    - nextId посилається на існуючий вузол
    """
    errors = []

    if "start" not in tree:
        errors.append('Tree must have a "start" node')

    for node_id, node in tree.items():
        options = node.get("options")
        result = node.get("result")

        if not node.get("question") and not result:
            errors.append(f'Node "{node_id}" must have either a question or result')

        if not result and not options:
            errors.append(f'Non-terminal node "{node_id}" must have options')

        if result and options:
            errors.append(f'Terminal node "{node_id}" should not have options')

        if result and not result.get("name"):
            errors.append(f'Terminal node "{node_id}" result is missing name')

        if not options:
            continue

        if len(options) > MAX_OPTIONS:
            errors.append(
                f'Node "{node_id}" has too many options ({len(options)}). '
                f'Consider splitting into sub-categories.'
            )

        for index, option in enumerate(options):
            if not option.get("text"):
                errors.append(f'Node "{node_id}" option {index} is missing text')
            next_id = option.get("nextId")
            if not next_id:
                errors.append(f'Node "{node_id}" option {index} is missing nextId')
            elif next_id not in tree:
                errors.append(
                    f'Node "{node_id}" option {index} references non-existent node "{next_id}"'
                )

    return TreeValidation(valid=not errors, errors=errors)


class CatalogSource:
    """
    Власник завантаженого дерева та кешу кандидатів.

    Кеш скидається тільки явним reload().

    Приклад використання:
        source = CatalogSource()              # вбудоване дерево
        candidates = source.candidates
        source.reload()                       # перечитати файл
    """

    def __init__(self, tree_path: Optional[str] = None, validate: bool = True):
        self.tree_path = Path(tree_path) if tree_path else DEFAULT_TREE_PATH
        self.validate = validate

        self._tree: Optional[Dict[str, dict]] = None
        self._candidates: Optional[Tuple[Candidate, ...]] = None
        self.validation: Optional[TreeValidation] = None

    @classmethod
    def from_tree(cls, tree: Dict[str, dict], validate: bool = True) -> "CatalogSource":
        """Створити з вже завантаженого дерева"""
        source = cls(validate=validate)
        source._set_tree(tree)
        return source

    def _set_tree(self, tree: Dict[str, dict]) -> None:
        self._tree = tree
        self._candidates = extract_candidates(tree)

        if self.validate:
            self.validation = validate_tree(tree)
            for error in self.validation.errors:
                logger.warning("Tree validation: %s", error)

        logger.info("Catalog loaded: %d candidates", len(self._candidates))

    def reload(self) -> Tuple[Candidate, ...]:
        """Перечитати дерево з файлу та перебудувати кеш"""
        self._set_tree(load_tree(str(self.tree_path)))
        return self._candidates

    @property
    def tree(self) -> Dict[str, dict]:
        if self._tree is None:
            self.reload()
        return self._tree

    @property
    def candidates(self) -> Tuple[Candidate, ...]:
        if self._candidates is None:
            self.reload()
        return self._candidates

    def get_candidate(self, name: str) -> Optional[Candidate]:
        for candidate in self.candidates:
            if candidate.name == name:
                return candidate
        return None

    def __repr__(self) -> str:
        loaded = len(self._candidates) if self._candidates is not None else "not loaded"
        return f"CatalogSource(path='{self.tree_path}', candidates={loaded})"
