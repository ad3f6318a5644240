# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from site_crawler.config import BATCH_SIZE, CrawlerConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,expect_exc",
    [
        ("batch_size: 3\ntimeout: 2.5", None),
        (json.dumps({"batch_size": 3, "timeout": 2.5}), None),
        ("batch_size: 0", ValidationError),
        ("timeout: -1", ValidationError),
        ("unknown_option: 1", ValidationError),
        ("not: a: mapping", ValueError),
        ("::invalid yaml", TypeError),
    ],
)
def test_load_config_variants(tmp_path, content, expect_exc):
    # Write YAML or JSON based on content
    suffix = ".yaml" if not content.strip().startswith("{") else ".json"
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CrawlerConfig)
        assert cfg.batch_size == 3
        assert cfg.timeout == 2.5


def test_defaults_without_config_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = load_config(None)
    assert cfg == CrawlerConfig()
    assert cfg.batch_size == BATCH_SIZE == 5
    assert cfg.timeout == 15.0
    assert cfg.max_redirects == 5


def test_default_config_file_is_used(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("max_redirects: 2\n", encoding="utf-8")
    assert load_config(None).max_redirects == 2


def test_explicit_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")


def test_unsupported_suffix(tmp_path):
    with pytest.raises(ValueError):
        load_config(write_file(tmp_path, "batch_size = 3", ".toml"))


def test_headers_and_blank_header_rejected():
    cfg = CrawlerConfig(user_agent="  Agent/2.0  ")
    assert cfg.headers()["User-Agent"] == "Agent/2.0"
    assert set(cfg.headers()) == {"User-Agent", "Accept", "Accept-Language"}
    with pytest.raises(ValidationError):
        CrawlerConfig(user_agent="   ")


def test_config_is_frozen():
    cfg = CrawlerConfig()
    with pytest.raises(ValidationError):
        cfg.batch_size = 10
