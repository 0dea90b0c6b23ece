import logging

import httpx

from bangla_transcribe.feature_modules.transcribe.config import TranscribeConfig as Cfg
from bangla_transcribe.feature_modules.transcribe.errors import UpstreamTranscriptionError
from bangla_transcribe.feature_modules.transcribe.schemas import TranscriptionResult

logger = logging.getLogger(__name__)

# OpenAI Audio Transcriptions endpoint (multipart)
# POST {OPENAI_API_BASE}/v1/audio/transcriptions
# form: file=@audio.webm, model=whisper-1, language=bn, response_format=json, temperature=0

async def transcribe_openai(
    client: httpx.AsyncClient,
    *,
    api_base: str,
    api_key: str,
    audio_bytes: bytes,
    model: str,
    lang: str = Cfg.TARGET_LANG,
) -> TranscriptionResult:
    url = f"{api_base}/v1/audio/transcriptions"

    files = {
        "file": (Cfg.UPLOAD_FILENAME, audio_bytes, Cfg.UPLOAD_MIME),
    }
    data = {
        "model": model,
        "language": lang,
        "response_format": "json",
        "temperature": "0",  # deterministic decoding
    }
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Accept": "application/json",
    }

    logger.info("Sending request to OpenAI Whisper API (model=%s, %d bytes)", model, len(audio_bytes))
    resp = await client.post(url, headers=headers, data=data, files=files)

    if not resp.is_success:
        logger.error("OpenAI API Error (HTTP %s): %s", resp.status_code, resp.text)
        raise UpstreamTranscriptionError(resp.status_code, resp.text)

    result = TranscriptionResult.model_validate(resp.json())
    logger.info("OpenAI response received: language=%s duration=%s", result.language, result.duration)
    return result
