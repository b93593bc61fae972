import datetime as dt
from typing import Optional
from zoneinfo import ZoneInfo


TRUTHY = {"1", "true", "yes", "on"}


def sao_paulo_now() -> dt.datetime:
    """Current time in America/Sao_Paulo."""
    return dt.datetime.now(ZoneInfo("America/Sao_Paulo"))


def now_iso_sao_paulo() -> str:
    """ISO datetime in America/Sao_Paulo."""
    return sao_paulo_now().isoformat()


def contains_ci(haystack: str, needle: str) -> bool:
    """Case-insensitive substring test (casefold, so 'ß' matches 'SS')."""
    return needle.casefold() in haystack.casefold()


def env_flag(raw: Optional[str], default: bool) -> bool:
    """Parse a boolean env var; unset or blank keeps the default."""
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in TRUTHY


def as_sao_paulo(d: dt.datetime) -> dt.datetime:
    """Attach America/Sao_Paulo to naive datetimes; aware ones are kept as-is."""
    if d.tzinfo is None or d.utcoffset() is None:
        return d.replace(tzinfo=ZoneInfo("America/Sao_Paulo"))
    return d
