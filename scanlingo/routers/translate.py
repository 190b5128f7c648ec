"""
ScanLingo — Translation Router
================================
    POST  /api/v1/translate
        Translate text into the selected language. Never fails on a
        backend error: the source text comes back with `error` set, so the
        client always has something to show.
"""

from fastapi import APIRouter, Depends, status
from loguru import logger

from scanlingo.config import Settings, get_settings
from scanlingo.dependencies import get_llm
from scanlingo.llm_engine import GeminiClient
from scanlingo.orchestrator import TranslationOrchestrator
from scanlingo.schemas import TranslateRequest, TranslateResponse
from scanlingo.text_pipeline.language_detector import detect_language

router = APIRouter(prefix="/api/v1", tags=["Translation"])


@router.post(
    "/translate",
    response_model=TranslateResponse,
    summary="Translate text (falls back to the source text)",
    status_code=status.HTTP_200_OK,
)
async def translate(
    request: TranslateRequest,
    llm: GeminiClient = Depends(get_llm),
    settings: Settings = Depends(get_settings),
) -> TranslateResponse:
    logger.info(
        f"[TranslateRouter] POST /translate | target={request.target_language!r} | "
        f"chars={len(request.text)}"
    )

    source_lang, confidence = detect_language(request.text)
    orchestrator = TranslationOrchestrator(
        llm,
        language=request.target_language,
        source_text=request.text,
        settings=settings,
    )
    result = await orchestrator.retranslate()
    skipped = result.language == settings.base_language or not request.text.strip()

    return TranslateResponse(
        text=result.text,
        target_language=result.language,
        source_language=source_lang,
        source_language_confidence=confidence,
        translated=result.error is None and not skipped,
        error=result.error,
    )
