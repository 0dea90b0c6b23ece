from __future__ import annotations
import re
from typing import Final

# Bengali Unicode block
_BENGALI_PATTERN: Final[re.Pattern[str]] = re.compile(r"[\u0980-\u09FF]")

def contains_bengali(text: str | None) -> bool:
    """
    True when at least one character of `text` falls in U+0980–U+09FF.

    Presence test, not a majority test: a single Bengali proper noun inside an
    otherwise English transcript is enough to skip translation.
    """
    if not text:
        return False
    return _BENGALI_PATTERN.search(text) is not None
