from __future__ import annotations
from typing import Any, Dict, Optional

from bangla_transcribe.feature_modules.transcribe.clock import now_ms

class TranscribeError(Exception):
    """Base for every failure that is reported to the caller as JSON."""
    status_code: int = 500

    def __init__(self, error: str, *, status_code: Optional[int] = None, **extra: Any) -> None:
        super().__init__(error)
        self.error = error
        if status_code is not None:
            self.status_code = status_code
        self.extra = extra

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.error, **self.extra}

class MethodNotAllowed(TranscribeError):
    status_code = 405

    def __init__(self) -> None:
        super().__init__("Method not allowed. Use POST.")

class ConfigurationMissing(TranscribeError):
    status_code = 500

    def __init__(self) -> None:
        super().__init__(
            "OpenAI API key not configured",
            setup="Add OPENAI_API_KEY to the server environment variables",
            help="Set OPENAI_API_KEY in the deployment settings or in a .env file next to the app",
        )

class BadContentType(TranscribeError):
    status_code = 400

    def __init__(self, received: Optional[str]) -> None:
        super().__init__(
            "Content-Type must be multipart/form-data for audio uploads",
            received=received or "none",
        )

class PayloadTooLarge(TranscribeError):
    status_code = 400

    def __init__(self, size_bytes: int, max_bytes: int) -> None:
        max_mib = max_bytes // (1024 * 1024)
        super().__init__(
            f"Audio file too large. Maximum size is {max_mib}MB.",
            fileSize=f"{_round_half_up(size_bytes / (1024 * 1024))}MB",
        )

class UpstreamTranscriptionError(TranscribeError):
    _MESSAGES = {
        401: "Invalid OpenAI API key. Please check your key.",
        429: "OpenAI API rate limit exceeded. Please try again later.",
        413: "Audio file too large for OpenAI API.",
    }

    def __init__(self, status: int, details: str) -> None:
        super().__init__(
            self._MESSAGES.get(status, "OpenAI API request failed"),
            status_code=status,
            details=details,
            status=status,
        )

class InternalError(TranscribeError):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(
            "Internal server error during transcription",
            message=message,
            timestamp=now_ms(),
        )

def _round_half_up(value: float) -> int:
    return int(value + 0.5)
