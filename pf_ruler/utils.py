from datetime import datetime
from pathlib import Path
from typing import Any

import yaml

from pf_ruler.constants import TIMESTAMP_FORMAT


def now_stamp() -> str:
    return datetime.now().strftime(TIMESTAMP_FORMAT)


def read_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def read_yaml_safe(path: Path) -> tuple[Any | None, str | None]:
    if not path.exists():
        return None, None
    try:
        return read_yaml(path), None
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        return None, str(exc)


def write_yaml(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(payload, handle, allow_unicode=True, sort_keys=False)


def get_string(data: dict[str, Any], key: str, default: str) -> str:
    value = data.get(key)
    if isinstance(value, str):
        return value
    return default


def get_string_list(data: dict[str, Any], key: str) -> list[str]:
    value = data.get(key)
    if not isinstance(value, list):
        return []
    return [item if isinstance(item, str) else "" for item in value]
