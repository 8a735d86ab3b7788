"""
StackAdvisor — Sessions Routes

Endpoints для інтерактивних сесій:
- Створення сесії
- Отримання стану
- Відповідь на питання
- Скидання та закриття сесії
"""

from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import (
    get_catalog, get_sessions,
    CatalogManager, SessionManager, AdvisorSession,
)
from ..models import (
    AnswerRequest,
    SessionStateResponse,
)

router = APIRouter(prefix="/sessions", tags=["Sessions"])


def _require_session(session_id: str, sessions: SessionManager) -> AdvisorSession:
    session = sessions.get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Session '{session_id}' not found")
    return session


def session_to_response(session: AdvisorSession) -> SessionStateResponse:
    """Конвертувати сесію в Pydantic модель"""
    return SessionStateResponse(**session.to_dict())


@router.post("", response_model=SessionStateResponse)
async def create_session(
    catalog: CatalogManager = Depends(get_catalog),
    sessions: SessionManager = Depends(get_sessions)
) -> SessionStateResponse:
    """
    Створити нову сесію.

    Повертає стан з повним каталогом та першим питанням.
    """
    if not catalog.is_loaded:
        raise HTTPException(
            status_code=503,
            detail=f"Catalog not available: {catalog.error}"
        )

    session = sessions.create_session(catalog)
    return session_to_response(session)


@router.get("/{session_id}", response_model=SessionStateResponse)
async def get_session(
    session_id: str,
    sessions: SessionManager = Depends(get_sessions)
) -> SessionStateResponse:
    """
    Отримати поточний стан сесії.

    Повертає:
    - Статус сесії (active / found / empty / exhausted)
    - Кандидатів, що залишились
    - Історію відповідей
    - Наступне питання (якщо є)
    - Рекомендацію (якщо залишився один кандидат)
    """
    session = _require_session(session_id, sessions)
    return session_to_response(session)


@router.post("/{session_id}/answer", response_model=SessionStateResponse)
async def answer_question(
    session_id: str,
    request: AnswerRequest,
    catalog: CatalogManager = Depends(get_catalog),
    sessions: SessionManager = Depends(get_sessions)
) -> SessionStateResponse:
    """
    Відповісти на питання.

    Приклад:
    ```json
    {
        "question_id": "primary_focus",
        "answer": "Yes"
    }
    ```

    Відповідь поза оголошеним списком не є помилкою — сесія
    переходить у статус "empty".
    """
    session = _require_session(session_id, sessions)

    if request.question_id not in catalog.question_bank:
        raise HTTPException(
            status_code=404,
            detail=f"Question '{request.question_id}' not found"
        )

    if not session.answer(request.question_id, request.answer):
        raise HTTPException(
            status_code=409,
            detail=f"Question '{request.question_id}' was already answered"
        )

    return session_to_response(session)


@router.post("/{session_id}/reset", response_model=SessionStateResponse)
async def reset_session(
    session_id: str,
    sessions: SessionManager = Depends(get_sessions)
) -> SessionStateResponse:
    """Почати сесію спочатку"""
    session = _require_session(session_id, sessions)
    session.reset()
    return session_to_response(session)


@router.delete("/{session_id}")
async def delete_session(
    session_id: str,
    sessions: SessionManager = Depends(get_sessions)
):
    """Закрити сесію"""
    if not sessions.delete_session(session_id):
        raise HTTPException(status_code=404, detail=f"Session '{session_id}' not found")
    return {"session_id": session_id, "deleted": True}
