"""Word search API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Path, Query

from ..core.errors import InvalidRequestError, WordNotFoundError
from ..models.request import WordQuery
from ..models.response import WordResponse

router = APIRouter(prefix="/api/v1", tags=["words"])

# Import the global search engine instance
from ..engine_instance import search_engine


@router.get(
    "/words",
    response_model=List[WordResponse],
    summary="Search words",
    description="Search headwords by Igbo or English keyword with page, range and sort modifiers"
)
async def search_words(
    keyword: Optional[str] = Query(None, description="Keyword in Igbo or English"),
    is_english: Optional[bool] = Query(
        None, alias="isEnglish", description="Match the keyword against English definitions"
    ),
    page: Optional[str] = Query(None, description="1-indexed page number"),
    range_: Optional[str] = Query(None, alias="range", description="Index interval, e.g. [10,19]"),
    sort: Optional[str] = Query(None, description='Sort spec, e.g. ["word": "desc"]')
) -> List[WordResponse]:
    """
    Search for words matching a keyword.

    Without a keyword the whole dictionary is listed. Malformed page,
    range and sort values fall back to defaults instead of failing.
    """
    request = WordQuery(keyword=keyword, is_english=is_english, page=page, range=range_, sort=sort)

    try:
        return await search_engine.search(request)

    except InvalidRequestError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get(
    "/words/{word_id}",
    response_model=WordResponse,
    summary="Get word by id",
    description="Get a single headword entry by its identifier"
)
async def get_word(
    word_id: str = Path(..., description="The word identifier")
) -> WordResponse:
    """Get a single word by id."""
    try:
        return await search_engine.get_word(word_id)

    except WordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
