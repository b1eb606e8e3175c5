# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from email_scout.config import CrawlerConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


def test_defaults_match_documented_constants():
    cfg = CrawlerConfig()
    assert cfg.page_budget == 100
    assert cfg.concurrency == 5
    assert cfg.timeout == 15.0
    assert cfg.max_retries == 2


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("page_budget: 10\nconcurrency: 2", ".yaml", None),
        (json.dumps({"page_budget": 10, "concurrency": 2}), ".json", None),
        ("page_budget: 0", ".yml", ValidationError),
        ("unknown_key: 1", ".yaml", ValidationError),
        ("- just\n- a list", ".yaml", TypeError),
        ("key: [unclosed", ".yaml", ValueError),
        ("{not json", ".json", ValueError),
        ("page_budget = 10", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CrawlerConfig)
        assert cfg.page_budget == 10
        assert cfg.concurrency == 2
        assert cfg.timeout == 15.0


def test_load_config_default_missing_uses_builtin(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert load_config(None) == CrawlerConfig()


def test_load_config_default_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("page_budget: 7\n", encoding="utf-8")
    assert load_config(None).page_budget == 7


def test_explicit_path_not_found(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_config_is_frozen():
    cfg = CrawlerConfig()
    with pytest.raises(ValidationError):
        cfg.page_budget = 5
    assert cfg.model_copy(update={"page_budget": 5}).page_budget == 5
