from typing import Optional

from pydantic import BaseModel, ConfigDict

class TranscriptionResult(BaseModel):
    """Subset of the Whisper `response_format=json` body we rely on."""
    model_config = ConfigDict(extra="ignore")

    text: Optional[str] = None
    language: Optional[str] = None
    duration: Optional[float] = None

class TranscribeSuccess(BaseModel):
    success: bool = True
    original: str
    bengali: str
    language_detected: str
    confidence: float
    timestamp: int
    model: str
    duration: Optional[float] = None

class ConnectionProbe(BaseModel):
    success: bool = True
    message: str = "API connected successfully"
    timestamp: int
    apiKeyPresent: bool
