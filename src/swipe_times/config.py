import os
import secrets
from typing import Optional

import dotenv

from swipe_times.core.log_manager import logger, set_log_level

dotenv.load_dotenv("settings.env")

# --- DEFAULTS ---
DEFAULT_PORT = 8080
DEFAULT_SWIPE_THRESHOLD_PX = 50.0


def _get_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid integer for {name}: '{raw}'. Using default {default}.")
        return default


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Invalid number for {name}: '{raw}'. Using default {default}.")
        return default


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")


SECRET_KEY = os.getenv("SECRET_KEY")
if not SECRET_KEY:
    SECRET_KEY = secrets.token_hex(32)

PORT: int = _get_int("PORT", DEFAULT_PORT)
RELOAD: bool = _get_bool("RELOAD", False)

# Minimum horizontal travel (device-independent px) before a gesture counts as a swipe
SWIPE_THRESHOLD_PX: float = _get_float("SWIPE_THRESHOLD_PX", DEFAULT_SWIPE_THRESHOLD_PX)

# Optional fixed seed for the draw order, mostly useful for demos
RANDOM_SEED: Optional[int] = _get_int("RANDOM_SEED", None)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
set_log_level(LOG_LEVEL)
