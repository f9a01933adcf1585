"""Load and validate environment variables. Uses python-dotenv.

Values are read on every call, never cached at import time, so the backend
address can be changed between calls (tests rely on this). Callers should use
the accessor functions below rather than reading `os.environ` directly.
"""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
import os


def _project_root() -> Path:
    """Resolve project root (the directory holding `roomlobby/`)."""
    return Path(__file__).resolve().parent.parent.parent


def load_config() -> None:
    """
    Load .env from project root. Idempotent; safe to call multiple times.
    Existing environment variables win over .env values.
    """
    env_path = _project_root() / ".env"
    load_dotenv(env_path, override=False)


def get_required(key: str) -> str:
    """
    Get required env var. Raises if missing or empty.

    Raises:
        ValueError: If key is missing or empty after trimming.
    """
    load_config()
    val = os.getenv(key, "").strip()
    if not val:
        raise ValueError(
            f"Missing required environment variable: {key}. "
            "Set it in .env or export it."
        )
    return val


def get_optional(key: str, default: str = "") -> str:
    """Get optional env var; return default if missing or empty."""
    load_config()
    val = os.getenv(key, "").strip()
    return val if val else default


def get_optional_float(key: str, default: Optional[float] = None) -> Optional[float]:
    """Get optional env var as float; return default if missing, invalid or not positive."""
    raw = get_optional(key)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


# --- Public config accessors ---

def api_base_url() -> str:
    """Required: root address of the backend API, without trailing slash."""
    return get_required("ROOMLOBBY_API_URL").rstrip("/")


def api_timeout() -> Optional[float]:
    """Optional: request timeout in seconds. Default None (wait indefinitely)."""
    return get_optional_float("ROOMLOBBY_API_TIMEOUT")


def log_level() -> str:
    """Optional: log level name. Default INFO."""
    return get_optional("ROOMLOBBY_LOG_LEVEL", "INFO").upper()


def project_root() -> Path:
    """Project root directory."""
    return _project_root()


def log_file() -> Optional[Path]:
    """Optional: path of a log file, relative paths under the project root. Default None."""
    raw = get_optional("ROOMLOBBY_LOG_FILE")
    if not raw:
        return None
    path = Path(raw)
    return path if path.is_absolute() else _project_root() / path
