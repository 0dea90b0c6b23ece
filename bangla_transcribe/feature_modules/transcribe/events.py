from __future__ import annotations
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Content-Type": "application/json",
}

@dataclass
class TranscribeEvent:
    """One inbound request, detached from the web framework that delivered it."""
    http_method: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[Union[bytes, str]] = None
    is_base64_encoded: bool = False

    def __post_init__(self) -> None:
        self.http_method = (self.http_method or "").upper()
        self.headers = {k.lower(): v for k, v in (self.headers or {}).items()}

    def header(self, name: str) -> Optional[str]:
        return self.headers.get(name.lower())

@dataclass
class HandlerResponse:
    status_code: int
    body: str = ""
    headers: Dict[str, str] = field(default_factory=lambda: dict(CORS_HEADERS))

    @classmethod
    def json(cls, status_code: int, payload: Mapping[str, Any]) -> "HandlerResponse":
        return cls(status_code=status_code, body=json.dumps(payload, ensure_ascii=False))

    def json_body(self) -> Any:
        return json.loads(self.body) if self.body else None
