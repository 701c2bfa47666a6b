"""Request-scoped value types for the transcription pipeline."""
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class AudioInput:
    data: bytes
    mime_type: str
    size: int = field(default=-1)

    def __post_init__(self) -> None:
        match self.size:
            case s if s < 0:
                object.__setattr__(self, "size", len(self.data))
            case _:
                pass


@dataclass(frozen=True)
class ValidationOutcome:
    valid: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class Segment:
    # 0.0 means the provider did not report a log-probability.
    avg_logprob: float = 0.0


@dataclass(frozen=True)
class RawProviderResponse:
    text: Optional[str]
    language: Optional[str] = None
    duration: Optional[float] = None
    segments: Optional[tuple[Segment, ...]] = None


@dataclass(frozen=True)
class TranscriptionResult:
    text: str
    detected_language: str
    confidence: float
    duration_seconds: float
    provider_id: str
    model_id: str
    cost: Optional[float] = None
