from __future__ import annotations
import base64
import json
import logging
import re
from typing import AsyncGenerator, Optional, Union

from starlette.datastructures import Headers, UploadFile
from starlette.formparsers import MultiPartException, MultiPartParser

from bangla_transcribe.feature_modules.transcribe.errors import BadContentType, PayloadTooLarge
from bangla_transcribe.feature_modules.transcribe.events import TranscribeEvent

logger = logging.getLogger(__name__)

# Anything outside the standard and url-safe base64 alphabets, padding included
_B64_NOISE = re.compile(rb"[^A-Za-z0-9+/\-_]")

def is_connection_probe(event: TranscribeEvent) -> bool:
    """A JSON body of `{"test": true}` is a liveness check, not an upload."""
    if not event.body:
        return False
    try:
        data = json.loads(event.body)
    except (ValueError, TypeError):
        # Not a JSON body, continue with file processing
        return False
    return isinstance(data, dict) and data.get("test") is True

def ensure_multipart(event: TranscribeEvent) -> str:
    ctype = event.header("content-type")
    if not ctype or "multipart/form-data" not in ctype.lower():
        raise BadContentType(ctype)
    return ctype

def decode_body(event: TranscribeEvent) -> bytes:
    body = event.body or b""
    if event.is_base64_encoded:
        return _lenient_b64decode(body)
    if isinstance(body, str):
        return body.encode("utf-8")
    return body

def _lenient_b64decode(body: Union[bytes, str]) -> bytes:
    """
    Decode like Node's `Buffer.from(s, "base64")`: stray characters are skipped,
    missing padding is tolerated and a dangling sixth-bit character is dropped.
    """
    data = body.encode("ascii", "ignore") if isinstance(body, str) else body
    data = _B64_NOISE.sub(b"", data).replace(b"-", b"+").replace(b"_", b"/")
    if len(data) % 4 == 1:
        data = data[:-1]
    return base64.b64decode(data + b"=" * (-len(data) % 4))

def check_size(raw: bytes, max_bytes: int) -> bytes:
    if len(raw) > max_bytes:
        raise PayloadTooLarge(len(raw), max_bytes)
    return raw

async def _single_chunk(raw: bytes) -> AsyncGenerator[bytes, None]:
    yield raw

async def extract_audio(content_type: str, raw: bytes) -> bytes:
    """
    Return the bytes of the first file part in a multipart body.

    Falls back to the whole body when no file part can be parsed, so clients
    that post bare audio under a multipart content type keep working.
    """
    # Older starlette releases raise KeyError instead of MultiPartException here
    if "boundary=" not in content_type.lower():
        logger.warning("Multipart content type without boundary; forwarding raw body")
        return raw

    parser = MultiPartParser(Headers({"content-type": content_type}), _single_chunk(raw))
    try:
        form = await parser.parse()
    except MultiPartException as e:
        logger.warning("Multipart parse failed (%s); forwarding raw body", e)
        return raw

    upload: Optional[UploadFile] = None
    try:
        for _, value in form.multi_items():
            if isinstance(value, UploadFile):
                upload = value
                break
        if upload is None:
            logger.warning("No file part in multipart body; forwarding raw body")
            return raw
        return await upload.read()
    finally:
        await form.close()
