"""
StackAdvisor — API Models

Pydantic моделі для запитів та відповідей API.
"""

from pydantic import BaseModel, Field
from typing import List, Optional

from stack_advisor.walker import SessionStatus


# ============================================================
# Catalog Models
# ============================================================

class CandidateModel(BaseModel):
    """Кандидат рекомендації"""
    name: str
    description: str = ""
    url: str = ""
    tags: List[str] = []
    reasons: List[str] = []


class CatalogResponse(BaseModel):
    """Список кандидатів каталогу"""
    candidates: List[CandidateModel]
    total: int


class QuestionModel(BaseModel):
    """Питання з банку"""
    id: str
    text: str
    description: Optional[str] = None
    type: str
    answers: List[str]


class QuestionBankResponse(BaseModel):
    """Весь банк питань"""
    questions: List[QuestionModel]
    total: int


# ============================================================
# Session Models
# ============================================================

class AnswerRequest(BaseModel):
    """Відповідь на питання"""
    question_id: str = Field(..., min_length=1)
    answer: str = Field(..., description="Одна з оголошених відповідей питання")

    class Config:
        json_schema_extra = {
            "example": {
                "question_id": "primary_focus",
                "answer": "Yes"
            }
        }


class HistoryEntryModel(BaseModel):
    """Запис питання-відповідь"""
    question_id: str
    answer: str
    candidates_remaining: int


class SessionStateResponse(BaseModel):
    """Повний стан сесії"""
    session_id: str
    status: SessionStatus
    remaining_candidates: List[CandidateModel]
    remaining_count: int
    asked_count: int
    history: List[HistoryEntryModel]
    path_summary: List[str] = []
    is_complete: bool
    is_found: bool
    next_question: Optional[QuestionModel] = None
    recommendation: Optional[CandidateModel] = None
    minimum_questions: int = 0
    created_at: str
    updated_at: str


# ============================================================
# Health
# ============================================================

class HealthResponse(BaseModel):
    """Стан сервера"""
    status: str
    version: str
    catalog_loaded: bool
    catalog_size: int
    question_bank_size: int
    active_sessions: int
