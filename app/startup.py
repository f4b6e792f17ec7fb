"""Startup validation and configuration checks."""

from deps import Path, logging

from .config import get_together_api_key

logger = logging.getLogger(__name__)


def validate_config() -> None:
    """Validate config at startup and warn if .env or TOGETHER_API_KEY missing."""
    env_file = Path(".env")
    env_exists = env_file.exists()
    key_set = bool(get_together_api_key())
    if not env_exists and not key_set:
        logger.warning(".env file not found. AI fix suggestions will be disabled.")
        logger.warning("Create .env and set TOGETHER_API_KEY to enable AI fix suggestions.")
    elif not key_set:
        logger.warning("TOGETHER_API_KEY not set. AI fix suggestions will be disabled.")
