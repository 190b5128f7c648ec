"""
ScanLingo — LLM Engine
=======================
Async client for the Gemini generateContent endpoint.

Flow:
  1. Wrap a prompt (optionally plus an inline base64 image) in the
     {contents:[{parts:[...]}], generationConfig:{...}} body
  2. POST to <gemini_api_url>/<model>:generateContent?key=<api key>
  3. Pull candidates[0].content.parts[0].text out of the JSON answer

Failures are raised, never swallowed here; the search pipeline and the
translation orchestrator decide how a failure is shown on screen.

  TransportError       — connect error, timeout, non-2xx status
  InvalidResponseError — body is not JSON or lacks the expected fields
"""

from __future__ import annotations

from typing import Any, Optional

import httpx
from loguru import logger

from scanlingo.config import Settings, get_settings
from scanlingo.errors import InvalidResponseError, TransportError

_SAFETY_SETTINGS = [
    {"category": "HARM_CATEGORY_HARASSMENT", "threshold": "BLOCK_NONE"},
]


# ── Response parsing ──────────────────────────────────────────────────────────

def extract_text(data: Any) -> str:
    """Return candidates[0].content.parts[0].text or raise InvalidResponseError."""
    if isinstance(data, dict) and data.get("error"):
        error = data["error"]
        message = error.get("message", "Unknown error occurred") if isinstance(error, dict) else str(error)
        raise InvalidResponseError(f"Backend reported an error: {message}")
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        raise InvalidResponseError("Received unexpected response format")
    if not isinstance(text, str) or not text.strip():
        raise InvalidResponseError("Response text is empty")
    return text


def _error_message(resp: httpx.Response) -> str:
    try:
        return resp.json().get("error", {}).get("message") or resp.reason_phrase
    except Exception:
        return resp.reason_phrase


# ── Client ────────────────────────────────────────────────────────────────────

class GeminiClient:
    """
    Thin async wrapper around one httpx.AsyncClient.

    Pass *http_client* to share a connection pool or to plug in a
    mock transport; otherwise the client owns (and closes) its own.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings or get_settings()
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=self.settings.request_timeout)

    @property
    def endpoint(self) -> str:
        base = self.settings.gemini_api_url.rstrip("/")
        return f"{base}/{self.settings.gemini_model}:generateContent"

    def _generation_config(self, temperature: float, max_output_tokens: int) -> dict:
        return {
            "temperature": temperature,
            "topK": self.settings.top_k,
            "topP": self.settings.top_p,
            "maxOutputTokens": max_output_tokens,
        }

    async def _post(self, body: dict) -> str:
        try:
            resp = await self._http.post(
                self.endpoint,
                params={"key": self.settings.gemini_api_key},
                json=body,
            )
        except httpx.TimeoutException as e:
            raise TransportError(f"Generative backend timed out: {e}")
        except httpx.HTTPError as e:
            raise TransportError(f"Cannot reach generative backend: {e}")

        if resp.status_code // 100 != 2:
            message = _error_message(resp)
            logger.error(f"[LLM] HTTP {resp.status_code}: {message}")
            raise TransportError(message, status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError:
            raise InvalidResponseError("Generative backend returned malformed JSON")
        return extract_text(data)

    async def generate(
        self,
        prompt: str,
        *,
        temperature: Optional[float] = None,
        max_output_tokens: Optional[int] = None,
        relax_safety: bool = False,
    ) -> str:
        """Send a text-only prompt and return the raw answer text."""
        body: dict = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": self._generation_config(
                self.settings.search_temperature if temperature is None else temperature,
                max_output_tokens or self.settings.search_max_output_tokens,
            ),
        }
        if relax_safety:
            body["safetySettings"] = _SAFETY_SETTINGS

        logger.info(f"[LLM] generateContent | model={self.settings.gemini_model} | prompt_len={len(prompt)}")
        return await self._post(body)

    async def generate_with_image(
        self,
        prompt: str,
        image_b64: str,
        mime_type: str = "image/jpeg",
    ) -> str:
        """Prompt plus one inline base64 image."""
        body = {
            "contents": [{
                "parts": [
                    {"text": prompt},
                    {"inlineData": {"mimeType": mime_type, "data": image_b64}},
                ]
            }],
        }
        logger.info(f"[LLM] generateContent (image) | mime={mime_type} | b64_len={len(image_b64)}")
        return await self._post(body)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()
