"""
ScanLingo — Camera Router
===========================
Helpers for the camera screen, which already holds OCR text or a photo:

    POST  /api/v1/analyze/image
        Upload a photo; the generative backend describes what it shows.

    POST  /api/v1/find
        Look for a phrase inside previously captured text and return the
        relevant excerpts, one per line.
"""

import base64

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from loguru import logger

from scanlingo.dependencies import get_llm
from scanlingo.errors import BackendError, InvalidResponseError
from scanlingo.llm_engine import GeminiClient
from scanlingo.schemas import FindRequest, FindResponse, ImageAnalysisResponse
from scanlingo.text_pipeline import IMAGE_ANALYSIS_PROMPT, build_find_prompt

router = APIRouter(prefix="/api/v1", tags=["Camera"])

_ALLOWED_IMAGE_TYPES = {"image/jpeg", "image/png", "image/webp"}


def _backend_http_error(e: BackendError) -> HTTPException:
    code = (
        status.HTTP_502_BAD_GATEWAY
        if isinstance(e, InvalidResponseError)
        else status.HTTP_503_SERVICE_UNAVAILABLE
    )
    return HTTPException(status_code=code, detail=str(e))


@router.post(
    "/analyze/image",
    response_model=ImageAnalysisResponse,
    summary="Describe an uploaded photo",
    status_code=status.HTTP_200_OK,
)
async def analyze_image(
    image_file: UploadFile = File(..., description="JPEG, PNG or WebP photo."),
    llm: GeminiClient = Depends(get_llm),
) -> ImageAnalysisResponse:
    mime_type = image_file.content_type or "image/jpeg"
    if mime_type not in _ALLOWED_IMAGE_TYPES:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=f"Unsupported image type '{mime_type}'.",
        )

    content = await image_file.read()
    if not content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Empty image upload.")

    logger.info(f"[CameraRouter] POST /analyze/image | {image_file.filename} ({len(content)} bytes)")
    try:
        text = await llm.generate_with_image(
            IMAGE_ANALYSIS_PROMPT,
            base64.b64encode(content).decode("ascii"),
            mime_type=mime_type,
        )
    except BackendError as e:
        logger.error(f"[CameraRouter] Image analysis failed: {e}")
        raise _backend_http_error(e)

    return ImageAnalysisResponse(content=text.strip(), mime_type=mime_type)


@router.post(
    "/find",
    response_model=FindResponse,
    summary="Find a phrase in captured text",
    status_code=status.HTTP_200_OK,
)
async def find_in_text(
    request: FindRequest,
    llm: GeminiClient = Depends(get_llm),
) -> FindResponse:
    logger.info(f"[CameraRouter] POST /find | query_len={len(request.search_query)}")
    try:
        raw = await llm.generate(build_find_prompt(request.search_query, request.detected_text))
    except BackendError as e:
        logger.error(f"[CameraRouter] Find failed: {e}")
        raise _backend_http_error(e)

    return FindResponse(excerpts=[ln.strip() for ln in raw.split("\n") if ln.strip()])
