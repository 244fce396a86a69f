import logging
import os
from dataclasses import dataclass
from typing import Optional

_BASE_DIR = os.path.abspath(os.path.dirname(__file__))


@dataclass(frozen=True)
class Settings:
    data_dir: str
    storage_prefix: str
    log_level: str
    business_name: str


def _getenv(name: str, default: str = "") -> str:
    return (os.environ.get(name) or default).strip()


def load_settings() -> Settings:
    return Settings(
        data_dir=_getenv("RECYCLE_DATA_DIR", os.path.join(_BASE_DIR, "data")),
        storage_prefix=_getenv("RECYCLE_STORAGE_PREFIX", "828-"),
        log_level=_getenv("RECYCLE_LOG_LEVEL", "INFO").upper(),
        business_name=_getenv("RECYCLE_BUSINESS_NAME", "828 Convenient Recycling"),
    )


def configure_logging(settings: Optional[Settings] = None):
    """Set up root logging once per process (Streamlit reruns call this every event)."""
    if getattr(configure_logging, "_applied", False):
        return
    configure_logging._applied = True
    s = settings or load_settings()
    logging.basicConfig(
        level=getattr(logging, s.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
