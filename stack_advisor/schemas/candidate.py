"""
StackAdvisor — Схема кандидата

Candidate — один можливий результат рекомендації (tech stack).
Незмінний запис: engine лише розбиває каталог на групи та копіює посилання.
"""

from dataclasses import dataclass, field
from typing import Iterable, Tuple


def _unique(items: Iterable[str]) -> Tuple[str, ...]:
    """Прибрати дублікати, зберігаючи порядок першої появи"""
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return tuple(result)


@dataclass(frozen=True)
class Candidate:
    """
    Кандидат рекомендації.

    Приклад:
        stack = Candidate(
            name="Next.js + Prisma",
            description="Full-stack React framework",
            url="https://nextjs.org",
            tags=("frontend", "react", "fullstack"),
        )
    """
    name: str
    description: str = ""
    url: str = ""
    tags: Tuple[str, ...] = field(default_factory=tuple)
    reasons: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # frozen → присвоюємо через object.__setattr__
        object.__setattr__(self, "tags", _unique(self.tags))
        object.__setattr__(self, "reasons", tuple(self.reasons))

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    def has_any_tag(self, tags: Iterable[str]) -> bool:
        return any(tag in self.tags for tag in tags)

    @classmethod
    def from_dict(cls, data: dict) -> "Candidate":
        """
        Створити з result-вузла дерева.

        Raises:
            ValueError: якщо result не має name
        """
        if not data.get("name"):
            raise ValueError(f"Result {data!r} is missing name")

        return cls(
            name=data["name"],
            description=data.get("description", ""),
            url=data.get("url", ""),
            tags=tuple(data.get("tags") or ()),
            reasons=tuple(data.get("reasons") or ()),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "url": self.url,
            "tags": list(self.tags),
            "reasons": list(self.reasons),
        }

    def __repr__(self) -> str:
        return f"Candidate('{self.name}', tags={list(self.tags)})"
