"""
StackAdvisor — Health Routes

Health check та інформація про систему.
"""

from fastapi import APIRouter, Depends

from stack_advisor import __version__
from ..dependencies import get_catalog, get_sessions, CatalogManager, SessionManager
from ..models import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    catalog: CatalogManager = Depends(get_catalog),
    sessions: SessionManager = Depends(get_sessions)
) -> HealthResponse:
    """
    Перевірка стану сервера.

    Повертає:
    - Статус сервера
    - Чи завантажено каталог
    - Кількість кандидатів та питань
    - Кількість активних сесій
    """
    return HealthResponse(
        status="ok" if catalog.is_loaded else "degraded",
        version=__version__,
        catalog_loaded=catalog.is_loaded,
        catalog_size=len(catalog.candidates),
        question_bank_size=len(catalog.question_bank),
        active_sessions=sessions.get_active_count()
    )


@router.get("/")
async def root():
    """Головна сторінка API"""
    return {
        "name": "StackAdvisor API",
        "version": __version__,
        "description": "Адаптивна рекомендація tech stack",
        "docs": "/docs",
        "health": "/health",
    }
