import os

from bangla_transcribe.config import settings
from bangla_transcribe.feature_modules.transcribe.env_loader import ensure_feature_env

class TranscribeConfig:
    # Static defaults
    TARGET_LANG: str = "bn"
    MAX_BYTES: int = 25 * 1024 * 1024  # upstream Whisper limit
    UPLOAD_FILENAME: str = "audio.webm"
    UPLOAD_MIME: str = "audio/webm"
    # Whisper has no per-request confidence score
    CONFIDENCE_PLACEHOLDER: float = 0.95

    # -------- dynamic getters --------
    @staticmethod
    def openai_api_key() -> str | None:
        # Read per invocation so a key added to the feature .env is picked up without restart
        ensure_feature_env(["OPENAI_API_KEY"])
        return os.getenv("OPENAI_API_KEY") or settings.openai_api_key or None

    @staticmethod
    def openai_api_base() -> str:
        return os.getenv("OPENAI_API_BASE", settings.openai_api_base).rstrip("/")

    @staticmethod
    def stt_model() -> str:
        return settings.openai_model_stt or "whisper-1"

    @staticmethod
    def translate_api_base() -> str:
        return os.getenv("TRANSLATE_API_BASE", settings.translate_api_base).rstrip("/")

    @staticmethod
    def timeout_s() -> float:
        return float(settings.request_timeout_seconds)
