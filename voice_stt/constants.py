"""All magic values live here — no inline literals anywhere else."""

# Audio validation
SUPPORTED_AUDIO_TYPES: tuple[str, ...] = (
    "audio/flac",
    "audio/mp3",
    "audio/mpeg",
    "audio/mp4",
    "audio/mpga",
    "audio/m4a",
    "audio/ogg",
    "audio/wav",
    "audio/webm",
)
# Provider upload ceiling (25 MiB), inclusive.
MAX_AUDIO_MB = 25
BYTES_PER_MB = 1024 * 1024
MAX_AUDIO_BYTES = MAX_AUDIO_MB * BYTES_PER_MB

# Multipart filename per MIME type; the provider sniffs format from the extension.
AUDIO_FILE_STEM = "audio"
DEFAULT_AUDIO_EXTENSION = "webm"
AUDIO_EXTENSIONS: dict[str, str] = {
    "audio/flac": "flac",
    "audio/mp3": "mp3",
    "audio/mpeg": "mp3",
    "audio/mp4": "mp4",
    "audio/mpga": "mpga",
    "audio/m4a": "m4a",
    "audio/ogg": "ogg",
    "audio/wav": "wav",
    "audio/webm": "webm",
}

# Confidence heuristic
DEFAULT_CONFIDENCE: float = 0.8
MIN_CONFIDENCE: float = 0.1
MAX_CONFIDENCE: float = 1.0

SECONDS_PER_MINUTE: float = 60.0

# Provider request
AUTO_LANGUAGE = "auto"
RESPONSE_FORMAT = "verbose_json"

# Provider variants
OPENAI_PROVIDER_ID = "openai"
OPENAI_ENDPOINT = "https://api.openai.com/v1"
OPENAI_WHISPER_MODEL = "whisper-1"
OPENAI_CREDENTIAL_ENV = "OPENAI_API_KEY"
# Whisper pricing: $0.006 per minute
OPENAI_PRICE_PER_MINUTE: float = 0.006

GROQ_PROVIDER_ID = "groq"
GROQ_ENDPOINT = "https://api.groq.com/openai/v1"
GROQ_WHISPER_MODEL = "whisper-large-v3-turbo"
GROQ_CREDENTIAL_ENV = "GROQ_API_KEY"

# Config defaults
DEFAULT_PROVIDER_ID = OPENAI_PROVIDER_ID
DEFAULT_TIMEOUT_SECONDS = "30"
DEFAULT_LOG_LEVEL = "INFO"

# Validation messages
MSG_UNSUPPORTED_FORMAT = "Unsupported audio format: %s. Supported formats: %s"
MSG_FILE_TOO_LARGE = "File too large: %.1fMB. Maximum size: %dMB"

# Failure details
MSG_MISSING_CREDENTIAL = "%s API key not configured (set %s)"
MSG_PROVIDER_HTTP_ERROR = "%s API error: %s %s"
MSG_PROVIDER_CONNECTION_ERROR = "%s API connection error: %s"
MSG_PROVIDER_NO_TEXT = "No transcription returned from %s API"
MSG_PROVIDER_TIMEOUT = "%s transcription timed out after %ss"
MSG_PROVIDER_TIMEOUT_SDK_DEFAULT = "%s transcription timed out"
MSG_EMPTY_RESULT = "Empty transcription result"

# User-facing messages per failure kind
MSG_USER_INVALID_AUDIO = "This recording can't be used: %s"
MSG_USER_NOT_CONFIGURED = "Voice input is not configured on this server."
MSG_USER_EMPTY = "We couldn't hear anything — please try recording again."
MSG_USER_FALLBACK = "Voice transcription is unavailable right now — please type your expense instead."

# Log messages
MSG_STATE = "STT state → %s"
MSG_VALIDATION_FAILED = "Audio rejected: %s"
MSG_CONFIG_FAILED = "STT misconfigured: %s"
MSG_CALLING_PROVIDER = "→ %s (%s), %d bytes, language=%s"
MSG_PROVIDER_FAILED = "✗ Transcription failed [%s]: %s"
MSG_TRANSCRIBED = "✓ Transcribed %.1fs of audio (confidence %.2f, cost $%.4f)"
MSG_CLI_STARTING = "Transcribing %s with %s…"
