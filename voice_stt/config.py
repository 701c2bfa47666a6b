from dataclasses import dataclass
import os
from dotenv import load_dotenv

from voice_stt.constants import (
    AUTO_LANGUAGE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PROVIDER_ID,
    DEFAULT_TIMEOUT_SECONDS,
)
from voice_stt.transcription.providers import PROVIDERS, ProviderConfig


@dataclass(frozen=True)
class Config:
    provider_id: str
    api_keys: dict[str, str]
    timeout: float
    default_language: str
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        provider_id = os.getenv("STT_PROVIDER", DEFAULT_PROVIDER_ID).strip().lower()
        raw_timeout = os.getenv("STT_TIMEOUT", DEFAULT_TIMEOUT_SECONDS)
        default_language = os.getenv("STT_DEFAULT_LANGUAGE", AUTO_LANGUAGE).strip() or AUTO_LANGUAGE
        log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)

        # Blank keys count as absent.
        api_keys = {
            pid: key
            for pid, key in (
                (p.provider_id, (os.getenv(p.credential_env) or "").strip())
                for p in PROVIDERS.values()
            )
            if key
        }

        return cls._validate(
            provider_id=provider_id,
            api_keys=api_keys,
            raw_timeout=raw_timeout,
            default_language=default_language,
            log_level=log_level,
        )

    @staticmethod
    def _validate(
        provider_id: str,
        api_keys: dict[str, str],
        raw_timeout: str,
        default_language: str,
        log_level: str,
    ) -> "Config":
        match provider_id:
            case pid if pid in PROVIDERS:
                pass
            case _:
                raise ValueError(
                    f"STT_PROVIDER must be one of: {', '.join(sorted(PROVIDERS))} (got {provider_id!r})"
                )

        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(f"STT_TIMEOUT must be a number of seconds (got {raw_timeout!r})") from None

        match timeout:
            case t if t > 0:
                pass
            case _:
                raise ValueError("STT_TIMEOUT must be greater than zero")

        return Config(
            provider_id=provider_id,
            api_keys=api_keys,
            timeout=timeout,
            default_language=default_language,
            log_level=log_level,
        )

    @property
    def provider(self) -> ProviderConfig:
        return PROVIDERS[self.provider_id]

    def api_key_for(self, provider_id: str) -> str | None:
        return self.api_keys.get(provider_id)
