"""Entry point — wires Config → provider → TranscriptionOrchestrator."""
import argparse
import asyncio
import logging
import mimetypes
from dataclasses import asdict
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler

from voice_stt.config import Config
from voice_stt.constants import MSG_CLI_STARTING
from voice_stt.transcription.errors import Failure, Success, http_status_for
from voice_stt.transcription.models import AudioInput
from voice_stt.transcription.orchestrator import TranscriptionOrchestrator
from voice_stt.transcription.providers import PROVIDERS, get_provider
from voice_stt.transcription.validator import mime_type_for
from voice_stt.usage import build_usage_record


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="voice-stt", description="Transcribe an audio file.")
    parser.add_argument("audio_file", type=Path)
    parser.add_argument("--language", default=None, help="language hint, 'auto' to detect")
    parser.add_argument("--provider", choices=sorted(PROVIDERS), default=None)
    parser.add_argument("--mime-type", default=None, help="override the type guessed from the file name")
    return parser.parse_args(argv)


def _guess_mime_type(path: Path) -> str:
    guessed = mime_type_for(path.name) or mimetypes.guess_type(path.name)[0]
    return guessed or ""


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    config = Config.from_env()
    _setup_logging(config.log_level)

    logger = logging.getLogger(__name__)

    provider = get_provider(args.provider) if args.provider else config.provider
    language = args.language or config.default_language
    audio = AudioInput(
        data=args.audio_file.read_bytes(),
        mime_type=args.mime_type or _guess_mime_type(args.audio_file),
    )
    logger.info(MSG_CLI_STARTING, args.audio_file, provider.provider_id)

    orchestrator = TranscriptionOrchestrator(
        provider,
        config.api_key_for(provider.provider_id),
        timeout=config.timeout,
    )
    outcome = asyncio.run(orchestrator.process_audio(audio, language))

    console = Console()
    match outcome:
        case Success(result=result):
            console.print_json(data={
                "result": asdict(result),
                "usage": build_usage_record(result, audio, language),
            })
            return 0
        case Failure() as failure:
            console.print_json(data={
                "error": failure.kind.value,
                "detail": failure.detail,
                "status": http_status_for(failure.kind),
                "provider_status": failure.status_code,
                "message": failure.user_message,
            })
            return 1


if __name__ == "__main__":
    raise SystemExit(main())
