# === FILE: email_scout/config.py ===
"""
Loading and validation of the EmailScout crawler configuration.
Pydantic describes the schema and checks the data.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class CrawlerConfig(BaseModel):
    """Tunables for one email crawl."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    page_budget: int = Field(100, ge=1, description="Max distinct URLs marked visited per crawl.")
    concurrency: int = Field(5, ge=1, description="Number of concurrent workers.")
    timeout: float = Field(15.0, gt=0, description="Timeout for a single request attempt (seconds).")
    max_retries: int = Field(2, ge=0, description="Extra attempts after a failed request.")
    retry_backoff: float = Field(
        0.0, ge=0, description="Base delay for exponential backoff between attempts (0 disables)."
    )
    user_agent: str = Field("EmailScoutBot/1.0", min_length=1, description="User-Agent header.")


_DEFAULT_CFG = Path("configs/default.yaml")


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


def load_config(path: Union[str, Path, None]) -> CrawlerConfig:
    """
    Read YAML or JSON and return a validated CrawlerConfig.

    With ``path=None`` the default file is used when present, otherwise the
    built-in defaults. An explicit path that does not exist raises
    FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return CrawlerConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return CrawlerConfig(**data)


__all__ = ["CrawlerConfig", "ValidationError", "load_config"]
