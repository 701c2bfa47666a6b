"""AudioValidator — format and size checks run before any network call."""
from voice_stt.constants import (
    AUDIO_EXTENSIONS,
    AUDIO_FILE_STEM,
    BYTES_PER_MB,
    DEFAULT_AUDIO_EXTENSION,
    MAX_AUDIO_BYTES,
    MAX_AUDIO_MB,
    MSG_FILE_TOO_LARGE,
    MSG_UNSUPPORTED_FORMAT,
    SUPPORTED_AUDIO_TYPES,
)
from voice_stt.transcription.models import ValidationOutcome


def normalize_mime_type(mime_type: str | None) -> str:
    """``"Audio/WebM; codecs=opus"`` → ``"audio/webm"``."""
    return (mime_type or "").split(";")[0].strip().lower()


def validate_audio(mime_type: str | None, byte_size: int) -> ValidationOutcome:
    """Never raises; callers must check ``valid``."""
    match normalize_mime_type(mime_type):
        case t if t in SUPPORTED_AUDIO_TYPES:
            pass
        case _:
            return ValidationOutcome(
                valid=False,
                error=MSG_UNSUPPORTED_FORMAT % (mime_type or "unknown", ", ".join(SUPPORTED_AUDIO_TYPES)),
            )

    match byte_size:
        case n if n > MAX_AUDIO_BYTES:
            return ValidationOutcome(
                valid=False,
                error=MSG_FILE_TOO_LARGE % (n / BYTES_PER_MB, MAX_AUDIO_MB),
            )
        case _:
            return ValidationOutcome(valid=True)


def filename_for(mime_type: str | None) -> str:
    extension = AUDIO_EXTENSIONS.get(normalize_mime_type(mime_type), DEFAULT_AUDIO_EXTENSION)
    return f"{AUDIO_FILE_STEM}.{extension}"


_MIME_BY_EXTENSION: dict[str, str] = {ext: mime for mime, ext in AUDIO_EXTENSIONS.items()}


def mime_type_for(filename: str) -> str | None:
    """``"memo.MP3"`` → ``"audio/mpeg"``; None for unknown extensions."""
    _, dot, extension = filename.rpartition(".")
    return _MIME_BY_EXTENSION.get(extension.lower()) if dot else None
