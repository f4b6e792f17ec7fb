"""Configuration from environment."""

from deps import load_dotenv, logging, os

load_dotenv()

DEFAULT_DEBOUNCE_MS = 500


def get_together_api_key() -> str:
    """Together.ai API key (required for AI features)."""
    return os.environ.get("TOGETHER_API_KEY", "").strip()


def get_together_model() -> str:
    """Together.ai model. Default: deepseek-ai/DeepSeek-V3.1."""
    return os.environ.get("TOGETHER_MODEL", "deepseek-ai/DeepSeek-V3.1").strip()


def get_debounce_seconds() -> float:
    """Delay before a document edit triggers a rescan. ENERGY_DEBOUNCE_MS, default 500."""
    try:
        ms = int(os.environ.get("ENERGY_DEBOUNCE_MS", str(DEFAULT_DEBOUNCE_MS)))
    except ValueError:
        ms = DEFAULT_DEBOUNCE_MS
    if ms < 0:
        ms = DEFAULT_DEBOUNCE_MS
    return ms / 1000.0


def get_realtime_default() -> bool:
    """Whether real-time analysis starts enabled. ENERGY_REALTIME, default on."""
    value = os.environ.get("ENERGY_REALTIME", "1").strip().lower()
    return value not in ("0", "false", "no", "off")


def get_log_level() -> int:
    name = os.environ.get("LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO
