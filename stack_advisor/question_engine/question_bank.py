"""
StackAdvisor — Question Bank

Фіксований впорядкований набір діагностичних питань.

Порядок питань важливий: при однаковому gain обирається перше питання
в порядку банку.
"""

from typing import Dict, Iterable, List, Optional, Set, Tuple

from stack_advisor.schemas import Question, QuestionType, ScoringKind, ScoringRule


YES_NO = ("Yes", "No")


DEFAULT_QUESTIONS: Tuple[Question, ...] = (
    Question(
        id="needs_auth",
        text="Does your project require authentication/login functionality?",
        description="Auth features often guide framework and backend selection",
        answers=YES_NO,
        scoring=ScoringRule(
            ScoringKind.ANY_TAG,
            tags=("auth", "firebase", "nextauth", "supabase", "django"),
        ),
    ),
    Question(
        id="mobile_app",
        text="Is your project intended to be mobile-first or a cross-platform app?",
        description="Useful for distinguishing mobile vs web-first stacks",
        answers=YES_NO,
        scoring=ScoringRule(
            ScoringKind.ANY_TAG,
            tags=("mobile", "flutter", "reactnative", "ionic"),
        ),
    ),
    Question(
        id="interactive_ui",
        text="Will the UI require high interactivity (like a dashboard or real-time UI)?",
        description="Some frameworks are better for rich interactive experiences",
        answers=YES_NO,
        scoring=ScoringRule(
            ScoringKind.ANY_TAG,
            tags=("react", "svelte", "vue", "websocket"),
        ),
    ),
    Question(
        id="payment_integration",
        text="Will your app include payment or checkout functionality?",
        description="E-commerce and SaaS apps often require secure payment support",
        answers=YES_NO,
        scoring=ScoringRule(
            ScoringKind.ANY_TAG,
            tags=("stripe", "commerce", "payment", "saas"),
        ),
    ),
    Question(
        id="batteries_included",
        text="Do you prefer a batteries-included framework with built-in tools?",
        description="These frameworks include routing, auth, ORM, templating, etc.",
        answers=YES_NO,
        scoring=ScoringRule(
            ScoringKind.ANY_TAG,
            tags=("django", "rails", "laravel", "nextjs", "fullstack"),
        ),
    ),
    Question(
        id="primary_focus",
        text="Is this primarily a frontend/UI project?",
        description="This helps us understand if you need UI frameworks or backend services",
        answers=YES_NO,
        scoring=ScoringRule(ScoringKind.HAS_TAG, tags=("frontend",)),
    ),
    Question(
        id="javascript_ecosystem",
        text="Do you prefer the JavaScript/TypeScript ecosystem?",
        description="JavaScript has the largest ecosystem but other languages have their strengths",
        answers=YES_NO,
        scoring=ScoringRule(
            ScoringKind.ANY_TAG,
            tags=("javascript", "typescript", "react", "nextjs", "nodejs"),
        ),
    ),
    Question(
        id="team_size",
        text="Are you working solo or with a small team (< 5 people)?",
        description="Smaller teams benefit from simpler, more integrated solutions",
        answers=("Solo/Small team", "Large team"),
        scoring=ScoringRule(
            ScoringKind.NAME_CONTAINS,
            tags=("t3", "create-react-app", "vite", "express", "flask"),
        ),
    ),
    Question(
        id="full_stack",
        text="Do you need both frontend AND backend functionality?",
        description="Full-stack frameworks can be more productive for complete applications",
        answers=("Yes, full-stack", "No, just one"),
        scoring=ScoringRule(ScoringKind.HAS_TAG, tags=("fullstack",)),
    ),
    Question(
        id="database_needed",
        text="Will your project need a database?",
        description="This affects whether you need database integration and ORMs",
        answers=YES_NO,
        scoring=ScoringRule(
            ScoringKind.ANY_TAG,
            tags=("database", "prisma", "mongodb", "sql"),
        ),
    ),
    Question(
        id="complexity_preference",
        text="Do you prefer simple, opinionated solutions?",
        description="Opinionated frameworks are faster to start but less customizable",
        answers=("Simple & opinionated", "Flexible & customizable"),
        scoring=ScoringRule(
            ScoringKind.NAME_CONTAINS,
            tags=("nextjs", "t3", "rails", "django", "laravel"),
        ),
    ),
    Question(
        id="deployment_target",
        text="Where will you primarily deploy?",
        type=QuestionType.MULTIPLE,
        answers=(
            "Vercel/Netlify (Easy)",
            "AWS/GCP (Scalable)",
            "Self-hosted",
            "Mobile app stores",
        ),
        scoring=ScoringRule(
            ScoringKind.TAG_CHOICE,
            choices=(
                ("vercel", "netlify", "serverless", "static"),
                ("aws", "gcp", "kubernetes", "scalable"),
                ("selfhosted", "docker", "php"),
                ("mobile", "flutter", "reactnative", "ionic"),
            ),
        ),
    ),
)


class QuestionBank:
    """
    Незмінний впорядкований банк питань.

    Приклад використання:
        bank = QuestionBank()               # питання за замовчуванням
        question = bank.get("primary_focus")
        remaining = bank.unasked({"needs_auth"})
    """

    def __init__(self, questions: Optional[Iterable[Question]] = None):
        self._questions: Tuple[Question, ...] = tuple(
            DEFAULT_QUESTIONS if questions is None else questions
        )
        self._by_id: Dict[str, Question] = {}

        for question in self._questions:
            if question.id in self._by_id:
                raise ValueError(f"Duplicate question id: '{question.id}'")
            self._by_id[question.id] = question

    @property
    def questions(self) -> Tuple[Question, ...]:
        return self._questions

    @property
    def ids(self) -> List[str]:
        return [q.id for q in self._questions]

    def get(self, question_id: str) -> Optional[Question]:
        """Знайти питання за id (None якщо невідоме)"""
        return self._by_id.get(question_id)

    def unasked(self, asked_ids: Set[str]) -> List[Question]:
        """Питання, яких ще не задавали, у порядку банку"""
        return [q for q in self._questions if q.id not in asked_ids]

    def __contains__(self, question_id: str) -> bool:
        return question_id in self._by_id

    def __iter__(self):
        return iter(self._questions)

    def __len__(self) -> int:
        return len(self._questions)

    def __repr__(self) -> str:
        return f"QuestionBank(questions={len(self._questions)})"
