# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from link_scout.config import CrawlerConfig, load_config, read_config_file


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,expect_exc",
    [
        ("base_url: http://example.com\nmax_depth: 1", None),
        (json.dumps({"base_url": "http://example.com", "requests_per_second": 4}), None),
        pytest.param("{}", ValidationError, id="empty-mapping-missing-base-url"),
        pytest.param("not: a: mapping", ValueError, id="yaml-syntax-error"),
        pytest.param("::invalid yaml", TypeError, id="top-level-scalar"),
    ],
)
def test_load_config_variants(tmp_path, content, expect_exc):
    suffix = ".yaml" if not content.strip().startswith("{") else ".json"
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CrawlerConfig)
        assert cfg.base_url == "http://example.com"


def test_defaults():
    cfg = CrawlerConfig(base_url="https://example.com/")
    assert cfg.max_depth == 3
    assert cfg.requests_per_second == 2.0
    assert cfg.output == Path("crawl_results.json")


@pytest.mark.parametrize(
    "url",
    ["", "example.com", "/relative/path", "ftp://example.com/", "http://", "http://[::1"],
)
def test_invalid_base_url(url):
    with pytest.raises(ValidationError):
        CrawlerConfig(base_url=url)


@pytest.mark.parametrize(
    "field,value",
    [("max_depth", -1), ("requests_per_second", 0), ("requests_per_second", -2.0), ("timeout", 0)],
)
def test_invalid_run_parameters(field, value):
    with pytest.raises(ValidationError):
        CrawlerConfig(base_url="http://example.com", **{field: value})


def test_unknown_field_is_rejected():
    with pytest.raises(ValidationError):
        CrawlerConfig(base_url="http://example.com", concurrency=10)


def test_overrides_win_over_file(tmp_path):
    cfg_path = write_file(tmp_path, "base_url: http://example.com\nmax_depth: 5", ".yml")
    cfg = load_config(cfg_path, max_depth=1, requests_per_second=None, base_url="http://other.org/")
    assert cfg.max_depth == 1
    assert cfg.requests_per_second == 2.0
    assert cfg.base_url == "http://other.org/"


def test_missing_explicit_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_default_file_is_optional(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert read_config_file(None) == {}
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("base_url: http://example.com\n", encoding="utf-8")
    assert load_config(None).base_url == "http://example.com"


def test_unsupported_suffix(tmp_path):
    cfg_path = write_file(tmp_path, "base_url = 'x'", ".toml")
    with pytest.raises(ValueError):
        load_config(cfg_path)
