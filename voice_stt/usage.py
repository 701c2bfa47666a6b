"""Usage-record shape handed to the persistence layer after a successful run."""
from typing import Any

from voice_stt.transcription.models import AudioInput, TranscriptionResult


def build_usage_record(result: TranscriptionResult, audio: AudioInput, language_hint: str) -> dict[str, Any]:
    """One ``model_runs`` row: provider, model, cost and confidence for billing/analytics."""
    return {
        "provider": result.provider_id,
        "model": result.model_id,
        "input": {
            "audio_duration": result.duration_seconds,
            "language": language_hint,
            "file_size": audio.size,
        },
        "output": {
            "text": result.text,
            "language": result.detected_language,
            "confidence": result.confidence,
        },
        # Free-tier runs are stored without a cost.
        "cost": result.cost or None,
    }
