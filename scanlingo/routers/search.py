"""
ScanLingo — Search Router
===========================
    POST  /api/v1/search
        Structured, multilingual answer for a typed or captured query,
        sections paired with images by position.

    GET   /api/v1/languages
        Languages a client can offer in its language picker.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger

from scanlingo.dependencies import get_image_search, get_llm
from scanlingo.image_search import ImageSearchClient
from scanlingo.languages import LANGUAGES
from scanlingo.llm_engine import GeminiClient
from scanlingo.schemas import LanguageOut, SearchRequest, SearchResponse, SectionOut
from scanlingo.search import SearchPipeline
from scanlingo.text_pipeline import Query, format_share_all
from scanlingo.text_pipeline.prompt_builder import PROMPT_LANGUAGES

router = APIRouter(prefix="/api/v1", tags=["Search"])

# error_kind → HTTP status
_STATUS = {
    "no_results":        status.HTTP_422_UNPROCESSABLE_ENTITY,
    "unexpected_format": status.HTTP_502_BAD_GATEWAY,
    "backend":           status.HTTP_503_SERVICE_UNAVAILABLE,
    "network":           status.HTTP_503_SERVICE_UNAVAILABLE,
}


@router.post(
    "/search",
    response_model=SearchResponse,
    summary="Structured multilingual answer with images",
    description=(
        "Sends the query to the generative backend with a language-specific "
        "4-part template while looking up images in parallel, then splits the "
        "answer into titled sections.\n\n"
        "**Errors** carry a localized `detail`:\n"
        "- 422 — the answer had no recognizable sections\n"
        "- 502 — the backend answered in an unexpected format\n"
        "- 503 — the backend could not be reached or returned an error"
    ),
    status_code=status.HTTP_200_OK,
)
async def search(
    request: SearchRequest,
    llm: GeminiClient = Depends(get_llm),
    images: ImageSearchClient = Depends(get_image_search),
) -> SearchResponse:
    logger.info(f"[SearchRouter] POST /search | lang={request.language!r}")

    outcome = await SearchPipeline(llm, images).run(
        Query(raw_text=request.query.strip(), language_code=request.language)
    )
    if not outcome.ok:
        raise HTTPException(status_code=_STATUS[outcome.error_kind], detail=outcome.error)

    return SearchResponse(
        query=outcome.query.raw_text,
        language=outcome.query.language_code,
        sections=[
            SectionOut(index=s.index, title=s.title, body=s.body, image_url=s.image_url)
            for s in outcome.results
        ],
        share_text=format_share_all(outcome.results),
    )


@router.get(
    "/languages",
    response_model=list[LanguageOut],
    summary="Supported languages",
)
def languages() -> list[LanguageOut]:
    return [
        LanguageOut(
            code=lang.code,
            label=lang.label,
            native_name=lang.native_name,
            tts_tag=lang.tts_tag,
            placeholder=lang.placeholder,
            structured_answers=lang.code in PROMPT_LANGUAGES,
        )
        for lang in LANGUAGES
    ]
