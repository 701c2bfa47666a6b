"""Provider variants — one ProviderConfig per OpenAI-compatible STT backend.

Adding a backend means adding a value to ``PROVIDERS``; the orchestrator and
HTTP client only ever see a ``ProviderConfig``.
"""
from dataclasses import dataclass

from voice_stt.constants import (
    GROQ_CREDENTIAL_ENV,
    GROQ_ENDPOINT,
    GROQ_PROVIDER_ID,
    GROQ_WHISPER_MODEL,
    OPENAI_CREDENTIAL_ENV,
    OPENAI_ENDPOINT,
    OPENAI_PRICE_PER_MINUTE,
    OPENAI_PROVIDER_ID,
    OPENAI_WHISPER_MODEL,
)


@dataclass(frozen=True)
class ProviderConfig:
    provider_id: str
    endpoint_url: str
    model_id: str
    credential_env: str
    price_per_minute: float = 0.0
    free_tier: bool = False

    def price(self, minutes: float) -> float:
        match self.free_tier:
            case True:
                return 0.0
            case False:
                return minutes * self.price_per_minute


OPENAI_WHISPER = ProviderConfig(
    provider_id=OPENAI_PROVIDER_ID,
    endpoint_url=OPENAI_ENDPOINT,
    model_id=OPENAI_WHISPER_MODEL,
    credential_env=OPENAI_CREDENTIAL_ENV,
    price_per_minute=OPENAI_PRICE_PER_MINUTE,
)

GROQ_WHISPER = ProviderConfig(
    provider_id=GROQ_PROVIDER_ID,
    endpoint_url=GROQ_ENDPOINT,
    model_id=GROQ_WHISPER_MODEL,
    credential_env=GROQ_CREDENTIAL_ENV,
    free_tier=True,
)

PROVIDERS: dict[str, ProviderConfig] = {
    p.provider_id: p for p in (OPENAI_WHISPER, GROQ_WHISPER)
}


def get_provider(provider_id: str) -> ProviderConfig:
    """Raises KeyError for an unregistered provider id."""
    return PROVIDERS[provider_id.strip().lower()]
