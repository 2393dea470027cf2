"""
Phrasebook API endpoints - catalog browsing and similar-phrase suggestions
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request

from phrase_router.models.internal_models import Language, PhraseCategory
from phrase_router.schemas.base import Envelope
from phrase_router.schemas.phrase import PhraseRead, SimilarPhrase
from phrase_router.services.fuzzy_matcher import FuzzyMatcher

router = APIRouter(prefix="/phrases", tags=["phrasebook"])


def get_matcher(request: Request) -> FuzzyMatcher:
    return request.app.state.translation_router.matcher


@router.get("", response_model=Envelope[list[PhraseRead]])
async def list_phrases(
    category: Optional[PhraseCategory] = None,
    matcher: FuzzyMatcher = Depends(get_matcher),
):
    """
    List catalog phrases

    - **category**: Optional category filter (restaurant, shopping, transportation,
      emergency, accommodation, greeting)
    """
    if category is None:
        entries = matcher.index.all_entries()
    else:
        entries = matcher.index.by_category(category)
    return Envelope(status="ok", data=[PhraseRead.from_entry(e) for e in entries])


@router.get("/similar", response_model=Envelope[list[SimilarPhrase]])
async def similar_phrases(
    q: str = Query(..., min_length=1, max_length=200),
    source_language: Language = Language.CHINESE,
    limit: int = Query(5, ge=1, le=20),
    matcher: FuzzyMatcher = Depends(get_matcher),
):
    """
    Suggest catalog phrases resembling the query

    - **q**: Text the user typed
    - **source_language**: Language of the query (zh or ko)
    - **limit**: Max number of suggestions (default: 5)
    """
    matches = matcher.find_similar(q, source_language, limit)
    return Envelope(
        status="ok",
        data=[
            SimilarPhrase(
                phrase=PhraseRead.from_entry(m.phrase),
                similarity=m.similarity,
                matched_language=m.matched_lang.value,
            )
            for m in matches
        ],
    )
