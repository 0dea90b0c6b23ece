from fastapi import APIRouter, Depends, Request, Response

from bangla_transcribe.feature_modules.transcribe.events import TranscribeEvent
from bangla_transcribe.feature_modules.transcribe.handler import TranscriptionHandler

# Method filtering happens in the handler so every verb gets the same JSON/CORS envelope
_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

router = APIRouter(tags=["transcribe"])

_handler = TranscriptionHandler()

def get_handler() -> TranscriptionHandler:
    return _handler

async def to_event(request: Request) -> TranscribeEvent:
    encoding = (request.headers.get("content-transfer-encoding") or "").lower()
    return TranscribeEvent(
        http_method=request.method,
        headers=dict(request.headers),
        body=await request.body(),
        is_base64_encoded=encoding == "base64",
    )

async def transcribe(request: Request, handler: TranscriptionHandler = Depends(get_handler)):
    """
    Audio (multipart/form-data) -> {original, bengali, ...}. POST {"test": true} to probe config.
    """
    result = await handler.handle(await to_event(request))
    return Response(content=result.body, status_code=result.status_code, headers=result.headers)

# Function path plus the public /api/* rewrite
router.add_api_route("/.netlify/functions/transcribe", transcribe, methods=_ALL_METHODS)
router.add_api_route("/api/transcribe", transcribe, methods=_ALL_METHODS)
