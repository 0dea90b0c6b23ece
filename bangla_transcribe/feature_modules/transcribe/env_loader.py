import os
import logging
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

def _load(paths: list[Path]) -> list[str]:
    loaded = []
    for p in paths:
        if p.exists() and load_dotenv(dotenv_path=p, override=False):
            loaded.append(str(p))
    return loaded

def ensure_feature_env(var_names: list[str]) -> None:
    """
    Load feature-local env (transcribe/.env.transcribe) and project root .env
    if any of the requested variables are missing. Values already present in
    the process environment always win.
    """
    if all(os.getenv(v) for v in var_names):
        return
    if os.getenv("TRANSCRIBE_LOAD_DOTENV", "true").lower() == "false":
        return

    here = Path(__file__).resolve().parent
    module_env = here / ".env.transcribe"
    # __file__ => .../bangla_transcribe/feature_modules/transcribe/env_loader.py
    root_env = Path(__file__).resolve().parents[3] / ".env"

    loaded = _load([module_env, root_env])
    if loaded:
        logger.info("transcribe.env_loader loaded env: %s", loaded)
