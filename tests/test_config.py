# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from chh_collector.config import CrawlerConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("seed_urls: [http://example.com/list]", ".yaml", None),
        (json.dumps({"seed_urls": ["http://example.com/list"]}), ".json", None),
        ("{}", ".yaml", ValidationError),
        ("seed_urls: []", ".yaml", ValidationError),
        ("seed_urls: ['']", ".yaml", ValidationError),
        ("seed_urls: [http://example.com/list]\nmax_depth: 3", ".yaml", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- just\n- a list", ".yaml", TypeError),
        ("{broken json", ".json", ValueError),
        ("seed_urls = 1", ".toml", ValueError),
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
        assert cfg.seed_urls == ["http://example.com/list"]


def test_defaults():
    cfg = CrawlerConfig(seed_urls=["http://example.com/"])
    assert cfg.follow_external_links is False
    assert cfg.scrape_seed_urls is True
    assert cfg.timeout == 3.0
    assert cfg.request_delay == 1.0
    assert cfg.user_agent.startswith("CHHCollector/")


def test_seed_urls_kept_verbatim():
    cfg = CrawlerConfig(seed_urls=["http://Example.com/list", "http://example.com/a/"])
    assert cfg.seed_urls == ["http://Example.com/list", "http://example.com/a/"]
    assert cfg.is_seed("http://example.com/a/")
    assert not cfg.is_seed("http://example.com/a")


def test_config_is_frozen():
    cfg = CrawlerConfig(seed_urls=["http://example.com/"])
    with pytest.raises(ValidationError):
        cfg.follow_external_links = True


@pytest.mark.parametrize("field,value", [("timeout", 0), ("request_delay", -1)])
def test_invalid_numbers(field, value):
    with pytest.raises(ValidationError):
        CrawlerConfig(seed_urls=["http://example.com/"], **{field: value})


def test_load_config_default_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        load_config(None)


def test_load_config_default_present(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text(
        "seed_urls: [http://example.com/]\nscrape_seed_urls: false", encoding="utf-8"
    )
    cfg = load_config(None)
    assert cfg.scrape_seed_urls is False


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_shipped_default_config_loads():
    cfg = load_config(Path(__file__).resolve().parent.parent / "configs" / "default.yaml")
    assert cfg.seed_urls == ["http://www.rapzilla.com/rz/music/freemp3s/download-list"]
    assert cfg.scrape_seed_urls is False
