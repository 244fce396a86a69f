import json
import logging
import os
import tempfile
import shutil
from typing import List, Any

from config import load_settings
from domain.constants import STORAGE_KEYS

logger = logging.getLogger(__name__)

# Overridable in tests; None means "ask the settings".
DATA_DIR = None


def data_dir() -> str:
    return os.path.normpath(DATA_DIR or load_settings().data_dir)


def _path(key: str) -> str:
    if key not in STORAGE_KEYS:
        raise KeyError(f"Unknown storage key: {key}")
    filename = f"{load_settings().storage_prefix}{key}.json"
    return os.path.join(data_dir(), filename)


def load_list(key: str) -> List[Any]:
    file_path = _path(key)
    if not os.path.exists(file_path):
        return []
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("Could not read %s, starting empty: %s", file_path, exc)
        return []
    if not isinstance(data, list):
        logger.warning("Expected a JSON array in %s, got %s; starting empty",
                       file_path, type(data).__name__)
        return []
    return data


def atomic_write(key: str, data: List[Any]):
    file_path = _path(key)
    os.makedirs(os.path.dirname(file_path), exist_ok=True)
    tmp_fd, tmp_path = tempfile.mkstemp(prefix='tmp_', suffix='.json',
                                        dir=os.path.dirname(file_path))
    with os.fdopen(tmp_fd, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    shutil.move(tmp_path, file_path)


def replace_all(key: str, items: List[Any]):
    atomic_write(key, items)
