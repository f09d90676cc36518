import logging, os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

log = logging.getLogger(__name__)

LOG_LEVEL_VAR = "JSONCONFIG_LOG_LEVEL"


def load_env(env_path: Optional[str] = None) -> bool:
    """Load variables from a .env file without overriding the environment."""
    env_file = Path(env_path) if env_path else Path(".env")
    if not env_file.exists():
        log.warning("'%s' not found - using environment only. Copy '.env.template' to '.env'.", env_file)
        return False
    load_dotenv(dotenv_path=env_file, override=False)
    log.info("Environment loaded from %s", env_file)
    return True


def log_level(default: str = "WARNING") -> int:
    name = (os.getenv(LOG_LEVEL_VAR) or default).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING
