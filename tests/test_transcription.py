"""WhisperTranscriptionClient tests"""
import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
from openai import APIConnectionError, APIStatusError, APITimeoutError

from voice_stt.transcription.client import TranscriptionClient
from voice_stt.transcription.errors import Failure, FailureKind
from voice_stt.transcription.models import AudioInput, RawProviderResponse, Segment
from voice_stt.transcription.providers import GROQ_WHISPER, OPENAI_WHISPER
from voice_stt.transcription.whisper import (
    WhisperTranscriptionClient,
    build_request,
    parse_response,
)

REQUEST = httpx.Request("POST", "https://api.openai.com/v1/audio/transcriptions")
AUDIO = AudioInput(data=b"fake-audio-data", mime_type="audio/webm;codecs=opus")


def make_openai(response=None, error=None) -> MagicMock:
    mock_openai = MagicMock()
    mock_openai.audio.transcriptions.create = AsyncMock(return_value=response, side_effect=error)
    mock_openai.close = AsyncMock()
    return mock_openai


def status_error(code: int, body: str) -> APIStatusError:
    response = httpx.Response(code, text=body, request=REQUEST)
    return APIStatusError(f"Error code: {code}", response=response, body=None)


def test_whisper_client_implements_abc():
    assert issubclass(WhisperTranscriptionClient, TranscriptionClient)


# ── request shape ─────────────────────────────────────────────────────────────


def test_build_request_has_multipart_fields():
    request = build_request(OPENAI_WHISPER, AUDIO, "en")

    assert request["file"] == ("audio.webm", b"fake-audio-data", "audio/webm")
    assert request["model"] == "whisper-1"
    assert request["response_format"] == "verbose_json"
    assert request["language"] == "en"


def test_build_request_omits_language_for_auto():
    assert "language" not in build_request(OPENAI_WHISPER, AUDIO, "auto")
    assert "language" not in build_request(OPENAI_WHISPER, AUDIO, "AUTO")
    assert "language" not in build_request(OPENAI_WHISPER, AUDIO, "")


def test_build_request_uses_provider_model():
    assert build_request(GROQ_WHISPER, AUDIO, "auto")["model"] == "whisper-large-v3-turbo"


# ── response parsing ──────────────────────────────────────────────────────────


def test_parse_response_from_dict():
    raw = parse_response({
        "text": " two coffees ",
        "language": "english",
        "duration": 4.5,
        "segments": [{"avg_logprob": -0.2}, {"avg_logprob": None}, {"text": "x"}],
    })

    assert raw == RawProviderResponse(
        text=" two coffees ",
        language="english",
        duration=4.5,
        segments=(Segment(-0.2), Segment(0.0), Segment(0.0)),
    )


def test_parse_response_from_sdk_object():
    raw = parse_response(SimpleNamespace(
        text="lunch",
        language="english",
        duration=2,
        segments=[SimpleNamespace(avg_logprob=-0.1)],
    ))

    assert raw.text == "lunch"
    assert raw.duration == 2.0
    assert raw.segments == (Segment(-0.1),)


def test_parse_response_missing_fields():
    raw = parse_response({"text": "hi"})

    assert raw.language is None
    assert raw.duration is None
    assert raw.segments is None


# ── transcribe ────────────────────────────────────────────────────────────────


async def test_transcribe_calls_endpoint_with_credential():
    mock_openai = make_openai({"text": "hello from voice", "language": "english", "duration": 3.0})

    with patch("voice_stt.transcription.whisper.AsyncOpenAI", return_value=mock_openai) as mock_cls:
        result = await WhisperTranscriptionClient(timeout=20).transcribe(
            GROQ_WHISPER, AUDIO, "auto", "gsk-key"
        )

    assert isinstance(result, RawProviderResponse)
    assert result.text == "hello from voice"
    kwargs = mock_cls.call_args.kwargs
    assert kwargs["api_key"] == "gsk-key"
    assert kwargs["base_url"] == "https://api.groq.com/openai/v1"
    assert kwargs["max_retries"] == 0
    assert kwargs["timeout"] == 20
    mock_openai.audio.transcriptions.create.assert_awaited_once()
    mock_openai.close.assert_awaited_once()


async def test_transcribe_without_timeout_uses_sdk_default():
    mock_openai = make_openai({"text": "ok"})

    with patch("voice_stt.transcription.whisper.AsyncOpenAI", return_value=mock_openai) as mock_cls:
        await WhisperTranscriptionClient().transcribe(OPENAI_WHISPER, AUDIO, "auto", "sk")

    assert "timeout" not in mock_cls.call_args.kwargs


async def test_transcribe_non_2xx_is_provider_error_with_status_and_body():
    mock_openai = make_openai(error=status_error(429, '{"error": "rate limited"}'))

    with patch("voice_stt.transcription.whisper.AsyncOpenAI", return_value=mock_openai):
        result = await WhisperTranscriptionClient().transcribe(OPENAI_WHISPER, AUDIO, "en", "sk")

    assert isinstance(result, Failure)
    assert result.kind is FailureKind.PROVIDER_ERROR
    assert result.status_code == 429
    assert result.body == '{"error": "rate limited"}'
    assert "429" in result.detail
    mock_openai.close.assert_awaited_once()


async def test_transcribe_timeout_is_dependency_timeout():
    mock_openai = make_openai(error=APITimeoutError(request=REQUEST))

    with patch("voice_stt.transcription.whisper.AsyncOpenAI", return_value=mock_openai):
        result = await WhisperTranscriptionClient(timeout=5).transcribe(OPENAI_WHISPER, AUDIO, "en", "sk")

    assert result.kind is FailureKind.DEPENDENCY_TIMEOUT
    mock_openai.close.assert_awaited_once()


async def test_transcribe_connection_error_is_provider_error():
    mock_openai = make_openai(error=APIConnectionError(request=REQUEST))

    with patch("voice_stt.transcription.whisper.AsyncOpenAI", return_value=mock_openai):
        result = await WhisperTranscriptionClient().transcribe(OPENAI_WHISPER, AUDIO, "en", "sk")

    assert result.kind is FailureKind.PROVIDER_ERROR
    assert result.status_code is None


async def test_transcribe_missing_text_is_provider_error():
    mock_openai = make_openai({"language": "english", "duration": 1.0})

    with patch("voice_stt.transcription.whisper.AsyncOpenAI", return_value=mock_openai):
        result = await WhisperTranscriptionClient().transcribe(OPENAI_WHISPER, AUDIO, "en", "sk")

    assert isinstance(result, Failure)
    assert result.kind is FailureKind.PROVIDER_ERROR
    assert "No transcription" in result.detail


async def test_transcribe_malformed_json_body_is_provider_error():
    error = json.JSONDecodeError("Expecting property name enclosed in double quotes", "{not json", 1)
    mock_openai = make_openai(error=error)

    with patch("voice_stt.transcription.whisper.AsyncOpenAI", return_value=mock_openai):
        result = await WhisperTranscriptionClient().transcribe(OPENAI_WHISPER, AUDIO, "en", "sk")

    assert isinstance(result, Failure)
    assert result.kind is FailureKind.PROVIDER_ERROR
    assert "invalid response" in result.detail
    mock_openai.close.assert_awaited_once()


async def test_transcribe_timeout_without_configured_seconds():
    mock_openai = make_openai(error=APITimeoutError(request=REQUEST))

    with patch("voice_stt.transcription.whisper.AsyncOpenAI", return_value=mock_openai):
        result = await WhisperTranscriptionClient().transcribe(OPENAI_WHISPER, AUDIO, "en", "sk")

    assert result.kind is FailureKind.DEPENDENCY_TIMEOUT
    assert result.detail == "openai transcription timed out"
    assert "None" not in result.detail


async def test_transcribe_timeout_names_configured_seconds():
    mock_openai = make_openai(error=APITimeoutError(request=REQUEST))

    with patch("voice_stt.transcription.whisper.AsyncOpenAI", return_value=mock_openai):
        result = await WhisperTranscriptionClient(timeout=5).transcribe(OPENAI_WHISPER, AUDIO, "en", "sk")

    assert result.detail == "openai transcription timed out after 5s"
