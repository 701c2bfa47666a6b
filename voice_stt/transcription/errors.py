"""Tagged results for the transcription pipeline.

Every step returns either ``Success`` or ``Failure`` instead of raising, so
callers can ``match`` on the outcome and decide between retrying, falling
back to manual entry, or surfacing the message to the user.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from voice_stt.constants import (
    MSG_USER_EMPTY,
    MSG_USER_FALLBACK,
    MSG_USER_INVALID_AUDIO,
    MSG_USER_NOT_CONFIGURED,
)
from voice_stt.transcription.models import TranscriptionResult


class FailureKind(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    CONFIG_ERROR = "CONFIG_ERROR"
    PROVIDER_ERROR = "PROVIDER_ERROR"
    EMPTY_RESULT = "EMPTY_RESULT"
    DEPENDENCY_TIMEOUT = "DEPENDENCY_TIMEOUT"


# Transport status the invoking HTTP handler should answer with.
_HTTP_STATUS: dict[FailureKind, int] = {
    FailureKind.VALIDATION_ERROR: 400,
    FailureKind.EMPTY_RESULT: 422,
    FailureKind.CONFIG_ERROR: 500,
    FailureKind.PROVIDER_ERROR: 502,
    FailureKind.DEPENDENCY_TIMEOUT: 504,
}


@dataclass(frozen=True)
class Success:
    result: TranscriptionResult


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    detail: str
    status_code: Optional[int] = None
    body: Optional[str] = None

    @property
    def retryable(self) -> bool:
        """Provider and timeout failures may succeed on a later attempt."""
        return self.kind in (FailureKind.PROVIDER_ERROR, FailureKind.DEPENDENCY_TIMEOUT)

    @property
    def user_message(self) -> str:
        match self.kind:
            case FailureKind.VALIDATION_ERROR:
                return MSG_USER_INVALID_AUDIO % self.detail
            case FailureKind.CONFIG_ERROR:
                return MSG_USER_NOT_CONFIGURED
            case FailureKind.EMPTY_RESULT:
                return MSG_USER_EMPTY
            case _:
                return MSG_USER_FALLBACK


Outcome = Union[Success, Failure]


def http_status_for(kind: FailureKind) -> int:
    return _HTTP_STATUS[kind]
