import datetime as dt
import os


def utc_now() -> dt.datetime:
    """Current time in UTC (timezone-aware)."""
    return dt.datetime.now(dt.timezone.utc)


def now_iso() -> str:
    """ISO datetime in UTC."""
    return utc_now().isoformat()


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean-ish environment variable ("1", "true", "yes", "on")."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")
