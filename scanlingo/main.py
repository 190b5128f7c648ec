"""
ScanLingo — FastAPI Entry Point

Multilingual assistant API
Camera / typed text → generative answers → structured, speakable sections
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from loguru import logger

from scanlingo.config import get_settings
from scanlingo.image_search import ImageSearchClient
from scanlingo.llm_engine import GeminiClient
from scanlingo.routers import camera, search, settings as settings_router, translate
from scanlingo.settings_store import SettingsStore

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup / shutdown lifecycle."""
    logger.info(f"🚀 Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"📌 Base language: {settings.base_language} | model: {settings.gemini_model}")

    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set — generative requests will fail.")

    app.state.llm = GeminiClient(settings)
    app.state.image_search = ImageSearchClient(settings)

    # Settings table (additive, non-fatal)
    app.state.settings_store = SettingsStore(settings.database_url)
    app.state.settings_store.init_db()

    try:
        yield
    finally:
        await app.state.llm.aclose()
        await app.state.image_search.aclose()
        app.state.settings_store.dispose()
        logger.info("🛑 Shutting down ScanLingo API")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description=(
        "Backend for a camera-and-voice assistant. Turns OCR or typed text "
        "into structured answers in several languages, translates on "
        "language change, and stores user preferences."
    ),
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# ── CORS (open for local dev, restrict in production) ─────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Routers ───────────────────────────────────────────────────────────────
app.include_router(search.router)
app.include_router(translate.router)
app.include_router(camera.router)
app.include_router(settings_router.router)


# ── Root health-check ─────────────────────────────────────────────────────
@app.get("/", tags=["Health"])
async def root():
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "status": "ok",
        "base_language": settings.base_language,
    }


@app.get("/health", tags=["Health"])
async def health():
    return {"status": "healthy"}
