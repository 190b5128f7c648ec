"""
ScanLingo — FastAPI Dependencies

Backend clients are created once in the app lifespan and kept on
app.state; routers reach them through these providers so tests can swap
them with app.dependency_overrides.
"""

from fastapi import Request

from scanlingo.image_search import ImageSearchClient
from scanlingo.llm_engine import GeminiClient
from scanlingo.settings_store import SettingsStore


def get_llm(request: Request) -> GeminiClient:
    return request.app.state.llm


def get_image_search(request: Request) -> ImageSearchClient:
    return request.app.state.image_search


def get_settings_store(request: Request) -> SettingsStore:
    return request.app.state.settings_store
