import logging
from typing import Optional

import httpx

from bangla_transcribe.feature_modules.transcribe.config import TranscribeConfig as Cfg

logger = logging.getLogger(__name__)

# Keyless Google Translate endpoint
# GET {TRANSLATE_API_BASE}/translate_a/single?client=gtx&sl=auto&tl=bn&dt=t&q=...
# -> [[["<translated>", "<source>", ...], ...], ...]

async def translate_to_bengali(client: httpx.AsyncClient, text: str, *, api_base: str) -> Optional[str]:
    """Return the first translated segment, or None if the call or its shape fails."""
    url = f"{api_base}/translate_a/single"
    params = {
        "client": "gtx",
        "sl": "auto",
        "tl": Cfg.TARGET_LANG,
        "dt": "t",
        "q": text,
    }
    try:
        logger.info("Translating to Bengali (%d chars)", len(text))
        resp = await client.get(url, params=params)
        resp.raise_for_status()
        data = resp.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("Translation failed: %s", e)
        return None

    try:
        translated = data[0][0][0]
    except (IndexError, KeyError, TypeError):
        translated = None
    if not isinstance(translated, str) or not translated:
        logger.warning("Translation response format unexpected")
        return None

    logger.info("Translation successful")
    return translated

async def translate_or_original(client: httpx.AsyncClient, text: str, *, api_base: str) -> str:
    """Best-effort enrichment: any translation failure collapses to the original text."""
    try:
        translated = await translate_to_bengali(client, text, api_base=api_base)
    except Exception as e:
        logger.warning("Translation failed: %s", e)
        return text
    return translated or text
