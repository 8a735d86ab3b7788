"""
StackAdvisor — API Dependencies

Dependency Injection для FastAPI.
Завантаження каталогу, зберігання сесій.
"""

import logging
from typing import Dict, Optional
from datetime import datetime, timedelta
import threading
import uuid

from stack_advisor.catalog import CatalogSource
from stack_advisor.question_engine import QuestionBank, minimum_questions
from stack_advisor.walker import StackWalker, SessionStatus

from .config import config


logger = logging.getLogger(__name__)


class CatalogManager:
    """
    Менеджер каталогу — завантажує дерево та банк питань один раз.
    Singleton pattern.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self.is_loaded = False
        self.source: Optional[CatalogSource] = None
        self.question_bank = QuestionBank()
        self.error: Optional[str] = None

    def load(self, tree_path: Optional[str] = None) -> bool:
        """Завантажити каталог"""
        if self.is_loaded and tree_path is None:
            return True

        try:
            self.source = CatalogSource(tree_path or config.tree_path)
            self.source.reload()
        except (OSError, ValueError) as e:
            self.error = str(e)
            self.is_loaded = False
            logger.error("Failed to load catalog: %s", e)
            return False

        self.error = None
        self.is_loaded = True
        logger.info(
            "Catalog ready: %d candidates, %d questions",
            len(self.source.candidates), len(self.question_bank)
        )
        return True

    @property
    def candidates(self):
        if not self.is_loaded:
            return ()
        return self.source.candidates


class AdvisorSession:
    """
    Сесія рекомендації.
    Обгортка над StackWalker для одного користувача.

    Зміни стану серіалізуються через власний lock сесії.
    """

    def __init__(self, session_id: str, walker: StackWalker):
        self.session_id = session_id
        self.walker = walker
        self.lock = threading.Lock()

        self.created_at = datetime.now()
        self.updated_at = datetime.now()

    def answer(self, question_id: str, answer: str) -> bool:
        """Записати відповідь (False якщо question_id невідомий або вже заданий)"""
        with self.lock:
            applied = self.walker.record_answer(question_id, answer)
            self.updated_at = datetime.now()
            recommendation = None
            if applied and self.walker.status == SessionStatus.FOUND:
                recommendation = self.walker.final_recommendation()

        if recommendation is not None:
            logger.info(
                "Analytics: session %s was recommended the \"%s\" stack",
                self.session_id, recommendation.name
            )
        return applied

    def reset(self) -> None:
        with self.lock:
            self.walker.reset()
            self.updated_at = datetime.now()

    def to_dict(self) -> dict:
        """Конвертувати в словник для API"""
        with self.lock:
            state = self.walker.current_state()
            question = self.walker.next_question()
            recommendation = self.walker.final_recommendation()
            summary = self.walker.path_summary()

        data = state.to_dict()
        data.update({
            "session_id": self.session_id,
            "path_summary": summary,
            "next_question": question.to_dict() if question else None,
            "recommendation": recommendation.to_dict() if recommendation else None,
            "minimum_questions": minimum_questions(state.remaining_count),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        })
        return data


class SessionManager:
    """
    Менеджер сесій.
    Зберігає активні сесії в пам'яті.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self.sessions: Dict[str, AdvisorSession] = {}
        self.lock = threading.Lock()

    def create_session(self, catalog: CatalogManager) -> AdvisorSession:
        """Створити нову сесію"""
        session_id = str(uuid.uuid4())[:8]

        walker = StackWalker(catalog.candidates, question_bank=catalog.question_bank)
        session = AdvisorSession(session_id, walker)

        with self.lock:
            # Очистка старих сесій
            self._cleanup_old_sessions()

            if len(self.sessions) >= config.max_sessions:
                oldest = min(self.sessions.values(), key=lambda s: s.updated_at)
                del self.sessions[oldest.session_id]

            self.sessions[session_id] = session

        logger.info("Session %s created (%d candidates)", session_id, len(walker.all_candidates))
        return session

    def get_session(self, session_id: str) -> Optional[AdvisorSession]:
        """Отримати сесію"""
        return self.sessions.get(session_id)

    def delete_session(self, session_id: str) -> bool:
        """Видалити сесію"""
        with self.lock:
            if session_id in self.sessions:
                del self.sessions[session_id]
                return True
        return False

    def clear(self) -> None:
        with self.lock:
            self.sessions.clear()

    def get_active_count(self) -> int:
        """Кількість активних сесій"""
        return len(self.sessions)

    def _cleanup_old_sessions(self):
        """Видалити застарілі сесії"""
        timeout = timedelta(minutes=config.session_timeout_minutes)
        now = datetime.now()

        expired = [
            sid for sid, session in self.sessions.items()
            if now - session.updated_at > timeout
        ]

        for sid in expired:
            del self.sessions[sid]

        if expired:
            logger.info("Expired %d sessions", len(expired))


# Глобальні менеджери
catalog_manager = CatalogManager()
session_manager = SessionManager()


# Dependency functions для FastAPI
def get_catalog() -> CatalogManager:
    """Dependency: отримати менеджер каталогу"""
    if not catalog_manager.is_loaded:
        catalog_manager.load()
    return catalog_manager


def get_sessions() -> SessionManager:
    """Dependency: отримати менеджер сесій"""
    return session_manager
