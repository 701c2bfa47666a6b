"""CostEstimator — usage cost from audio duration, priced per provider."""
from voice_stt.constants import SECONDS_PER_MINUTE
from voice_stt.transcription.providers import ProviderConfig


def estimate_cost(duration_seconds: float, provider: ProviderConfig) -> float:
    return provider.price(duration_seconds / SECONDS_PER_MINUTE)
