"""
ScanLingo — ScreenSession tests
"""

import asyncio

import httpx

from scanlingo.capture import CaptureError, CaptureSurface
from scanlingo.languages import message
from scanlingo.orchestrator import ScreenSession
from scanlingo.speech_pipeline import SpeechStatus

from conftest import CATS_ANSWER, gemini_json, prompt_of

SPANISH_ANSWER = "1. Descripción General\nLos gatos son mamíferos.\nTemas Relacionados:\nPerros"


def _backend(request):
    prompt = prompt_of(request)
    if prompt.startswith("Translate the following"):
        return httpx.Response(200, json=gemini_json('"Hola"'))
    if prompt.startswith("Proporcione"):
        return httpx.Response(200, json=gemini_json(SPANISH_ANSWER))
    return httpx.Response(200, json=gemini_json(CATS_ANSWER))


class _Camera(CaptureSurface):
    def __init__(self, text=None):
        self.text = text

    async def capture_text(self):
        if self.text is None:
            raise CaptureError("Camera permission denied")
        return self.text


def _screen(make_llm, make_images, speech_backend, settings, handler=_backend, language="en"):
    return ScreenSession(
        make_llm(handler),
        make_images(links=["a.jpg"]),
        speech_backend,
        language=language,
        settings=settings,
    )


def test_submit_query_replaces_results(make_llm, make_images, speech_backend, settings):
    async def scenario():
        async with _screen(make_llm, make_images, speech_backend, settings) as screen:
            outcome = await screen.submit_query("  cats ")
            return screen, outcome

    screen, outcome = asyncio.run(scenario())

    assert outcome.ok and not outcome.stale
    assert [s.title for s in screen.results] == ["Overview", "Key Details", "Related Topics"]
    assert screen.results[0].image_url == "a.jpg"
    assert screen.last_query.raw_text == "cats"
    assert screen.error is None and screen.is_loading is False


def test_blank_query_is_ignored(make_llm, make_images, speech_backend, settings):
    screen = _screen(make_llm, make_images, speech_backend, settings)
    assert asyncio.run(screen.submit_query("   ")) is None
    assert screen.last_query is None


def test_superseded_search_is_not_applied(make_llm, make_images, speech_backend, settings):
    async def scenario():
        slow_started = asyncio.Event()
        release = asyncio.Event()

        async def handler(request):
            if "about: slow" in prompt_of(request):
                slow_started.set()
                await release.wait()
                return httpx.Response(200, json=gemini_json("1. Slow\nlate answer"))
            return httpx.Response(200, json=gemini_json("1. Fast\nfresh answer"))

        screen = _screen(make_llm, make_images, speech_backend, settings, handler=handler)
        slow = asyncio.create_task(screen.submit_query("slow"))
        await slow_started.wait()
        await screen.submit_query("fast")
        release.set()
        return screen, await slow

    screen, stale_outcome = asyncio.run(scenario())

    assert stale_outcome.stale
    assert [s.title for s in screen.results] == ["Fast"]
    assert screen.last_query.raw_text == "fast"


def test_search_failure_sets_localized_error(make_llm, make_images, speech_backend, settings):
    def handler(request):
        return httpx.Response(200, json=gemini_json("No structure here."))

    screen = _screen(make_llm, make_images, speech_backend, settings, handler=handler, language="hi")
    asyncio.run(screen.submit_query("बिल्ली"))

    assert screen.results == ()
    assert screen.error == message("hi", "no_results")


def test_change_language_revoices_retranslates_and_reruns_query(make_llm, make_images, speech_backend, settings):
    async def scenario():
        async with _screen(make_llm, make_images, speech_backend, settings) as screen:
            await screen.submit_query("cats")
            await screen.on_text_captured("Hello")
            await screen.change_language("es")
            return screen

    screen = asyncio.run(scenario())

    assert screen.language == "es"
    assert screen.speech.voice.language_tag == "es-ES"
    assert screen.translation.translated_text == "Hola"
    assert screen.last_query.language_code == "es"
    assert [s.title for s in screen.results] == ["Descripción General", "Temas Relacionados"]


def test_capture_failure_sets_error(make_llm, make_images, speech_backend, settings):
    screen = _screen(make_llm, make_images, speech_backend, settings)

    assert asyncio.run(screen.capture(_Camera())) is None
    assert screen.error == "Camera permission denied"


def test_capture_normalizes_text_before_translation(make_llm, make_images, speech_backend, settings):
    screen = _screen(make_llm, make_images, speech_backend, settings)

    result = asyncio.run(screen.capture(_Camera("  MILK   2.50 \n\n BREAD 1.20  ")))

    assert result.text == "MILK 2.50\nBREAD 1.20"
    assert screen.translation.source_text == "MILK 2.50\nBREAD 1.20"


def test_toggle_speak_reads_results_in_screen_voice(make_llm, make_images, speech_backend, settings):
    async def scenario():
        async with _screen(make_llm, make_images, speech_backend, settings) as screen:
            await screen.submit_query("cats")
            first = await screen.toggle_speak()
            second = await screen.toggle_speak()
            return first, second

    first, second = asyncio.run(scenario())

    assert (first, second) == (SpeechStatus.speaking, SpeechStatus.idle)
    spoken = speech_backend.calls_named("speak")[0]
    assert spoken[1].startswith("Overview. Cats are mammals.")
    assert spoken[2] == "en-US"


def test_speech_error_surfaces_on_screen(make_llm, make_images, speech_backend, settings):
    async def scenario():
        async with _screen(make_llm, make_images, speech_backend, settings) as screen:
            await screen.toggle_speak("Read this")
            speech_backend.fail(screen.speech.session.utterance_id)
            return screen

    screen = asyncio.run(scenario())

    assert screen.error == message("en", "speech_failed")
    assert screen.speech.status is SpeechStatus.idle
    assert speech_backend.listener_count == 0


def test_share_helpers(make_llm, make_images, speech_backend, settings):
    screen = _screen(make_llm, make_images, speech_backend, settings)
    asyncio.run(screen.submit_query("cats"))

    assert screen.share_text(0) == "Overview\n\nCats are mammals."
    title, text = screen.share_all()
    assert title == "Search Results: cats"
    assert text.startswith("Overview\nCats are mammals.\n")
