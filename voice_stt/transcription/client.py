"""TranscriptionClient — abstract base for speech-to-text backends."""
from abc import ABC, abstractmethod

from voice_stt.transcription.errors import Failure
from voice_stt.transcription.models import AudioInput, RawProviderResponse
from voice_stt.transcription.providers import ProviderConfig


class TranscriptionClient(ABC):
    @abstractmethod
    async def transcribe(
        self,
        provider: ProviderConfig,
        audio: AudioInput,
        language_hint: str,
        api_key: str,
    ) -> RawProviderResponse | Failure:
        """Make exactly one provider call. Returns a Failure instead of raising."""
        ...
