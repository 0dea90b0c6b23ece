from __future__ import annotations
import logging
from typing import Optional, Protocol

import httpx

from bangla_transcribe.feature_modules.transcribe.adapters.google_translate import translate_or_original
from bangla_transcribe.feature_modules.transcribe.adapters.openai_whisper import transcribe_openai
from bangla_transcribe.feature_modules.transcribe.clock import now_ms
from bangla_transcribe.feature_modules.transcribe.config import TranscribeConfig
from bangla_transcribe.feature_modules.transcribe.errors import (
    ConfigurationMissing,
    InternalError,
    MethodNotAllowed,
    TranscribeError,
)
from bangla_transcribe.feature_modules.transcribe.events import HandlerResponse, TranscribeEvent
from bangla_transcribe.feature_modules.transcribe.schemas import ConnectionProbe, TranscribeSuccess
from bangla_transcribe.feature_modules.transcribe.script_detect import contains_bengali
from bangla_transcribe.feature_modules.transcribe.validators import (
    check_size,
    decode_body,
    ensure_multipart,
    extract_audio,
    is_connection_probe,
)

logger = logging.getLogger(__name__)

class ConfigProvider(Protocol):
    def openai_api_key(self) -> Optional[str]: ...
    def openai_api_base(self) -> str: ...
    def translate_api_base(self) -> str: ...
    def stt_model(self) -> str: ...
    def timeout_s(self) -> float: ...

class TranscriptionHandler:
    """
    Audio upload -> Whisper transcription -> (optional) Bengali translation.

    Stateless: one instance may serve any number of concurrent requests.
    `config` and `transport` are injectable so tests can substitute fakes.
    """

    def __init__(
        self,
        config: Optional[ConfigProvider] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        max_bytes: int = TranscribeConfig.MAX_BYTES,
    ) -> None:
        self._config = config or TranscribeConfig()
        self._transport = transport
        self._max_bytes = max_bytes

    async def handle(self, event: TranscribeEvent) -> HandlerResponse:
        # Pre-flight short-circuit
        if event.http_method == "OPTIONS":
            return HandlerResponse(status_code=200)
        try:
            return await self._handle_post(event)
        except TranscribeError as e:
            return HandlerResponse.json(e.status_code, e.to_body())
        except Exception as e:
            logger.exception("Transcription error")
            err = InternalError(str(e))
            return HandlerResponse.json(err.status_code, err.to_body())

    async def _handle_post(self, event: TranscribeEvent) -> HandlerResponse:
        if event.http_method != "POST":
            raise MethodNotAllowed()

        api_key = self._config.openai_api_key()
        if not api_key:
            raise ConfigurationMissing()

        if is_connection_probe(event):
            probe = ConnectionProbe(timestamp=now_ms(), apiKeyPresent=bool(api_key))
            return HandlerResponse.json(200, probe.model_dump())

        content_type = ensure_multipart(event)
        raw = check_size(decode_body(event), self._max_bytes)
        audio = await extract_audio(content_type, raw)

        model = self._config.stt_model()
        async with httpx.AsyncClient(transport=self._transport, timeout=self._config.timeout_s()) as client:
            result = await transcribe_openai(
                client,
                api_base=self._config.openai_api_base(),
                api_key=api_key,
                audio_bytes=audio,
                model=model,
            )

            original = result.text or ""
            bengali = original
            if not contains_bengali(original) and original.strip():
                bengali = await translate_or_original(
                    client, original, api_base=self._config.translate_api_base()
                )

        success = TranscribeSuccess(
            original=original,
            bengali=bengali,
            language_detected=result.language or "unknown",
            confidence=TranscribeConfig.CONFIDENCE_PLACEHOLDER,
            timestamp=now_ms(),
            model=model,
            duration=result.duration or None,
        )
        return HandlerResponse.json(200, success.model_dump())
