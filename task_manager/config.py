"""Runtime configuration from environment variables.

Environment variables checked:
- TASK_MANAGER_DB -> SQLite database path (default: tasks.db)
- TASK_MANAGER_HOST / TASK_MANAGER_PORT -> bind address (default: 0.0.0.0:8080)
- TASK_MANAGER_LOG_LEVEL -> root log level (default: INFO)
- TASK_MANAGER_SECRET_KEY -> session signing key for the web UI
"""

import os
import secrets
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()


@dataclass
class Settings:
    """Configuration for the task manager web app."""
    db_path: str = "tasks.db"
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    secret_key: str = ""


def get_settings() -> Settings:
    """Build settings from the environment, falling back to defaults."""
    port = os.getenv("TASK_MANAGER_PORT", "")
    try:
        port_value = int(port) if port else Settings.port
    except ValueError:
        raise ValueError(f"TASK_MANAGER_PORT must be an integer, got {port!r}") from None

    return Settings(
        db_path=os.getenv("TASK_MANAGER_DB", Settings.db_path),
        host=os.getenv("TASK_MANAGER_HOST", Settings.host),
        port=port_value,
        log_level=os.getenv("TASK_MANAGER_LOG_LEVEL", Settings.log_level).upper(),
        secret_key=os.getenv("TASK_MANAGER_SECRET_KEY", "") or secrets.token_hex(32),
    )
