"""ConfidenceEstimator — a confidence score from per-segment log-probabilities.

Whisper does not return a calibrated confidence. ``exp(mean(avg_logprob))``
is a rough approximation; downstream prefill gating at 0.7 relies on its
current numeric range, so keep the formula and bounds unchanged.
"""
import math
from collections.abc import Sequence

from voice_stt.constants import DEFAULT_CONFIDENCE, MAX_CONFIDENCE, MIN_CONFIDENCE
from voice_stt.transcription.models import Segment


def clamp_confidence(value: float) -> float:
    return max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, value))


def estimate_confidence(segments: Sequence[Segment] | None) -> float:
    # Exactly 0 means "not provided".
    scores = [s.avg_logprob for s in (segments or ()) if s.avg_logprob != 0]
    match scores:
        case []:
            return DEFAULT_CONFIDENCE
        case _:
            mean = sum(scores) / len(scores)
            return clamp_confidence(math.exp(mean))
