"""TranscriptionOrchestrator — validate → call provider → normalize → result.

The orchestrator is stateless: provider variant, credential and HTTP client
are fixed at construction, and each ``process_audio`` call makes at most one
provider request. Nothing is retried here; the caller owns retry policy.
"""
import asyncio
import logging
from enum import Enum
from typing import Optional

from voice_stt.constants import (
    AUTO_LANGUAGE,
    MSG_CALLING_PROVIDER,
    MSG_CONFIG_FAILED,
    MSG_EMPTY_RESULT,
    MSG_MISSING_CREDENTIAL,
    MSG_PROVIDER_FAILED,
    MSG_PROVIDER_TIMEOUT,
    MSG_STATE,
    MSG_TRANSCRIBED,
    MSG_VALIDATION_FAILED,
)
from voice_stt.transcription.client import TranscriptionClient
from voice_stt.transcription.confidence import estimate_confidence
from voice_stt.transcription.cost import estimate_cost
from voice_stt.transcription.errors import Failure, FailureKind, Outcome, Success
from voice_stt.transcription.models import AudioInput, RawProviderResponse, TranscriptionResult
from voice_stt.transcription.providers import ProviderConfig
from voice_stt.transcription.validator import validate_audio
from voice_stt.transcription.whisper import WhisperTranscriptionClient

logger = logging.getLogger(__name__)


class TranscriptionState(str, Enum):
    VALIDATING = "validating"
    INVOKING = "invoking"
    PARSING = "parsing"
    NORMALIZING = "normalizing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class TranscriptionOrchestrator:
    """Runs one audio payload through a configured provider variant."""

    def __init__(
        self,
        provider: ProviderConfig,
        api_key: Optional[str],
        client: Optional[TranscriptionClient] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self._provider = provider
        self._api_key = api_key
        self._client = client or WhisperTranscriptionClient(timeout=timeout)
        self._timeout = timeout

    async def process_audio(self, audio: AudioInput, language_hint: str = AUTO_LANGUAGE) -> Outcome:
        language_hint = (language_hint or "").strip() or AUTO_LANGUAGE

        _enter(TranscriptionState.VALIDATING)
        validation = validate_audio(audio.mime_type, audio.size)
        if not validation.valid:
            logger.warning(MSG_VALIDATION_FAILED, validation.error)
            return _fail(FailureKind.VALIDATION_ERROR, validation.error or "")

        _enter(TranscriptionState.INVOKING)
        match self._api_key:
            case str() as key if key.strip():
                pass
            case _:
                detail = MSG_MISSING_CREDENTIAL % (self._provider.provider_id, self._provider.credential_env)
                logger.warning(MSG_CONFIG_FAILED, detail)
                return _fail(FailureKind.CONFIG_ERROR, detail)

        logger.info(
            MSG_CALLING_PROVIDER,
            self._provider.provider_id,
            self._provider.model_id,
            audio.size,
            language_hint,
        )
        response = await self._invoke(audio, language_hint, key)

        _enter(TranscriptionState.PARSING)
        match response:
            case Failure() as failure:
                logger.error(MSG_PROVIDER_FAILED, failure.kind.value, failure.detail)
                _enter(TranscriptionState.FAILED)
                return failure
            case RawProviderResponse() as raw:
                pass

        _enter(TranscriptionState.NORMALIZING)
        return self._normalize(raw, language_hint)

    async def _invoke(self, audio: AudioInput, language_hint: str, api_key: str) -> RawProviderResponse | Failure:
        call = self._client.transcribe(self._provider, audio, language_hint, api_key)
        try:
            match self._timeout:
                case None:
                    return await call
                case seconds:
                    return await asyncio.wait_for(call, timeout=seconds)
        except asyncio.TimeoutError:
            return Failure(
                kind=FailureKind.DEPENDENCY_TIMEOUT,
                detail=MSG_PROVIDER_TIMEOUT % (self._provider.provider_id, self._timeout),
            )

    def _normalize(self, raw: RawProviderResponse, language_hint: str) -> Outcome:
        text = (raw.text or "").strip()
        match text:
            case "":
                logger.warning(MSG_EMPTY_RESULT)
                return _fail(FailureKind.EMPTY_RESULT, MSG_EMPTY_RESULT)
            case _:
                pass

        duration = max(0.0, raw.duration or 0.0)
        result = TranscriptionResult(
            text=text,
            detected_language=raw.language or language_hint,
            confidence=estimate_confidence(raw.segments),
            duration_seconds=duration,
            provider_id=self._provider.provider_id,
            model_id=self._provider.model_id,
            cost=estimate_cost(duration, self._provider),
        )
        logger.info(MSG_TRANSCRIBED, result.duration_seconds, result.confidence, result.cost)
        _enter(TranscriptionState.SUCCEEDED)
        return Success(result)


def _enter(state: TranscriptionState) -> None:
    logger.debug(MSG_STATE, state.value)


def _fail(kind: FailureKind, detail: str) -> Failure:
    _enter(TranscriptionState.FAILED)
    return Failure(kind=kind, detail=detail)
