"""
StackAdvisor — Catalog Routes

Кандидати каталогу та банк питань.
"""

from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import get_catalog, CatalogManager
from ..models import (
    CandidateModel,
    CatalogResponse,
    QuestionModel,
    QuestionBankResponse,
)

router = APIRouter(tags=["Catalog"])


@router.get("/catalog", response_model=CatalogResponse)
async def list_candidates(
    catalog: CatalogManager = Depends(get_catalog)
) -> CatalogResponse:
    """Отримати всіх кандидатів каталогу"""
    candidates = [CandidateModel(**c.to_dict()) for c in catalog.candidates]
    return CatalogResponse(candidates=candidates, total=len(candidates))


@router.get("/catalog/{name}", response_model=CandidateModel)
async def get_candidate(
    name: str,
    catalog: CatalogManager = Depends(get_catalog)
) -> CandidateModel:
    """Отримати кандидата за назвою (без урахування регістру)"""
    for candidate in catalog.candidates:
        if candidate.name.lower() == name.lower():
            return CandidateModel(**candidate.to_dict())

    raise HTTPException(status_code=404, detail=f"Candidate '{name}' not found")


@router.get("/questions", response_model=QuestionBankResponse)
async def list_questions(
    catalog: CatalogManager = Depends(get_catalog)
) -> QuestionBankResponse:
    """Отримати банк питань у порядку пріоритету"""
    questions = [QuestionModel(**q.to_dict()) for q in catalog.question_bank]
    return QuestionBankResponse(questions=questions, total=len(questions))
