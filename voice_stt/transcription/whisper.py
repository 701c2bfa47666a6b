"""WhisperTranscriptionClient — OpenAI-compatible Whisper speech-to-text backend."""
from typing import Any

from openai import APIConnectionError, APIError, APIStatusError, APITimeoutError, AsyncOpenAI

from voice_stt.constants import (
    AUTO_LANGUAGE,
    MSG_PROVIDER_CONNECTION_ERROR,
    MSG_PROVIDER_HTTP_ERROR,
    MSG_PROVIDER_NO_TEXT,
    MSG_PROVIDER_TIMEOUT,
    MSG_PROVIDER_TIMEOUT_SDK_DEFAULT,
    RESPONSE_FORMAT,
)
from voice_stt.transcription.client import TranscriptionClient
from voice_stt.transcription.errors import Failure, FailureKind
from voice_stt.transcription.models import AudioInput, RawProviderResponse, Segment
from voice_stt.transcription.providers import ProviderConfig
from voice_stt.transcription.validator import filename_for, normalize_mime_type


# ── response normalization (SDK objects or plain dicts) ───────────────────────


def _field(obj: Any, name: str, default: Any = None) -> Any:
    match obj:
        case None:
            return default
        case dict():
            return obj.get(name, default)
        case _:
            return getattr(obj, name, default)


def _float_or_none(value: Any) -> float | None:
    match value:
        case None | bool():
            return None
        case _:
            try:
                return float(value)
            except (TypeError, ValueError):
                return None


def _segments(raw_segments: Any) -> tuple[Segment, ...] | None:
    match raw_segments:
        case list() | tuple():
            return tuple(
                Segment(avg_logprob=_float_or_none(_field(raw, "avg_logprob")) or 0.0)
                for raw in raw_segments
            )
        case _:
            return None


def parse_response(response: Any) -> RawProviderResponse:
    text = _field(response, "text")
    language = _field(response, "language")
    return RawProviderResponse(
        text=text if isinstance(text, str) else None,
        language=language if isinstance(language, str) and language else None,
        duration=_float_or_none(_field(response, "duration")),
        segments=_segments(_field(response, "segments")),
    )


def build_request(provider: ProviderConfig, audio: AudioInput, language_hint: str) -> dict[str, Any]:
    """Multipart fields for POST {endpoint}/audio/transcriptions."""
    request: dict[str, Any] = {
        "file": (filename_for(audio.mime_type), audio.data, normalize_mime_type(audio.mime_type)),
        "model": provider.model_id,
        "response_format": RESPONSE_FORMAT,
    }
    match (language_hint or "").strip():
        case lang if lang.lower() in ("", AUTO_LANGUAGE):
            pass
        case lang:
            request["language"] = lang
    return request


# ── client ────────────────────────────────────────────────────────────────────


class WhisperTranscriptionClient(TranscriptionClient):

    def __init__(self, timeout: float | None = None) -> None:
        self._timeout = timeout

    async def transcribe(
        self,
        provider: ProviderConfig,
        audio: AudioInput,
        language_hint: str = AUTO_LANGUAGE,
        api_key: str = "",
    ) -> RawProviderResponse | Failure:
        name = provider.provider_id
        options: dict[str, Any] = {"api_key": api_key, "base_url": provider.endpoint_url, "max_retries": 0}
        if self._timeout is not None:
            options["timeout"] = self._timeout
        client = AsyncOpenAI(**options)
        try:
            response = await client.audio.transcriptions.create(
                **build_request(provider, audio, language_hint)
            )
        except APIStatusError as exc:
            body = exc.response.text
            return Failure(
                kind=FailureKind.PROVIDER_ERROR,
                detail=MSG_PROVIDER_HTTP_ERROR % (name, exc.status_code, body),
                status_code=exc.status_code,
                body=body,
            )
        except APITimeoutError:
            match self._timeout:
                case None:
                    detail = MSG_PROVIDER_TIMEOUT_SDK_DEFAULT % name
                case seconds:
                    detail = MSG_PROVIDER_TIMEOUT % (name, seconds)
            return Failure(kind=FailureKind.DEPENDENCY_TIMEOUT, detail=detail)
        except APIConnectionError as exc:
            return Failure(
                kind=FailureKind.PROVIDER_ERROR,
                detail=MSG_PROVIDER_CONNECTION_ERROR % (name, exc),
            )
        # Malformed 2xx bodies surface as JSONDecodeError, a ValueError.
        except (APIError, ValueError) as exc:
            return Failure(
                kind=FailureKind.PROVIDER_ERROR,
                detail=MSG_PROVIDER_HTTP_ERROR % (name, "invalid response", exc),
            )
        finally:
            await client.close()

        raw = parse_response(response)
        match raw.text:
            case None:
                return Failure(kind=FailureKind.PROVIDER_ERROR, detail=MSG_PROVIDER_NO_TEXT % name)
            case _:
                return raw
