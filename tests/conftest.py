"""
ScanLingo — shared test fixtures

Backends are never reached over the network: Gemini and image lookup are
served by httpx.MockTransport handlers, speech by FakeSpeechBackend.
"""

import json
from typing import Callable, List, Optional

import httpx
import pytest

from scanlingo.config import Settings
from scanlingo.image_search import ImageSearchClient
from scanlingo.llm_engine import GeminiClient
from scanlingo.speech_pipeline import SpeechBackend, SpeechEvent, SpeechEventKind

Handler = Callable[[httpx.Request], httpx.Response]

CATS_ANSWER = (
    "1. Overview\nCats are mammals.\n"
    "2. Key Details\nThey purr.\n"
    "Related Topics:\nDogs"
)


# ── HTTP helpers ──────────────────────────────────────────────────────────

def gemini_json(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def image_json(links: List[str]) -> dict:
    return {"items": [{"link": link} for link in links]}


def prompt_of(request: httpx.Request) -> str:
    return json.loads(request.content)["contents"][0]["parts"][0]["text"]


def mock_client(handler: Handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        gemini_api_key="test-key",
        google_search_api_key="search-key",
        google_search_cx="cx-id",
        database_url=f"sqlite:///{tmp_path / 'prefs.db'}",
    )


@pytest.fixture
def make_llm(settings):
    def factory(handler: Handler) -> GeminiClient:
        return GeminiClient(settings, http_client=mock_client(handler))
    return factory


@pytest.fixture
def make_images(settings):
    def factory(handler: Optional[Handler] = None, links: Optional[List[str]] = None) -> ImageSearchClient:
        if handler is None:
            def handler(request):
                return httpx.Response(200, json=image_json(links or []))
        return ImageSearchClient(settings, http_client=mock_client(handler))
    return factory


# ── Speech ────────────────────────────────────────────────────────────────

class FakeSpeechBackend(SpeechBackend):
    """Records every call; the test decides when an utterance finishes or fails."""

    def __init__(self, fail_on_speak: bool = False):
        super().__init__()
        self.calls: list = []
        self.fail_on_speak = fail_on_speak

    async def speak(self, text, language_tag, *, utterance_id=None):
        self.calls.append(("speak", text, language_tag, utterance_id))
        if self.fail_on_speak:
            raise RuntimeError("engine unavailable")
        self._emit(SpeechEvent(SpeechEventKind.start, utterance_id))

    async def stop(self):
        self.calls.append(("stop",))

    async def set_rate(self, rate):
        self.calls.append(("rate", rate))

    async def set_pitch(self, pitch):
        self.calls.append(("pitch", pitch))

    async def set_language(self, language_tag):
        self.calls.append(("language", language_tag))

    # test controls
    def finish(self, utterance_id):
        self._emit(SpeechEvent(SpeechEventKind.finish, utterance_id))

    def fail(self, utterance_id, message="engine crashed"):
        self._emit(SpeechEvent(SpeechEventKind.error, utterance_id, message))

    def calls_named(self, name):
        return [c for c in self.calls if c[0] == name]


@pytest.fixture
def speech_backend() -> FakeSpeechBackend:
    return FakeSpeechBackend()
