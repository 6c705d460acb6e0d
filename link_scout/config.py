# === FILE: link_scout/config.py ===
"""
Загрузка и валидация конфигурации LinkScout.

Settings come from an optional YAML/JSON file and from command-line
overrides; pydantic validates the merged result.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Annotated, Any, Literal, Optional, Union

import yaml
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, HttpUrl, TypeAdapter, ValidationError

_HTTP_URL = TypeAdapter(HttpUrl)


def _check_http_url(value: str) -> str:
    # the root is a Visited Set key, so it stays verbatim (HttpUrl would append "/")
    try:
        _HTTP_URL.validate_python(value)
    except ValidationError as exc:
        raise ValueError(f"not a valid HTTP(S) URL: {value!r}") from exc
    return value


RootURL = Annotated[str, AfterValidator(_check_http_url)]


class CrawlConfig(BaseModel):
    """Конфигурация одного запуска обхода."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    root_url: RootURL = Field(..., description="Starting URL of the crawl, kept exactly as given.")
    max_depth: int = Field(1, ge=0, description="Maximum recursion depth; 0 fetches only the root.")
    verbose: bool = Field(False, description="Log every link check at dispatch and at result.")
    timeout: Optional[float] = Field(
        None, gt=0, description="Per-request timeout in seconds; None waits indefinitely."
    )
    max_concurrency: Optional[int] = Field(
        None, ge=1, description="Cap on in-flight requests; None leaves them uncapped."
    )
    check_method: Literal["GET", "HEAD"] = Field(
        "GET", description="HTTP method used by link health checks."
    )


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def read_config_file(path: Union[str, Path]) -> dict[str, Any]:
    """Читает YAML или JSON и возвращает словарь настроек без валидации."""
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> CrawlConfig:
    """
    Build a validated CrawlConfig.

    Values from the file at *path* (if any) are overridden by every keyword
    argument that is not None. Raises pydantic.ValidationError when the merged
    settings are invalid, e.g. a missing ``root_url`` or a negative ``max_depth``.
    """
    data = read_config_file(path) if path is not None else {}
    data.update({k: v for k, v in overrides.items() if v is not None})
    return CrawlConfig(**data)


__all__ = ["CrawlConfig", "load_config", "read_config_file"]
