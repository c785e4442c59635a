# File: tests/test_cli.py
"""Тесты для CLI (`chh_collector.cli`) с использованием click.testing.CliRunner.
Проверяют команды `crawl`, `config`, `--version`, а также обработку ошибок.
"""
import asyncio
import importlib
import json

import pytest
from click.testing import CliRunner

from chh_collector.cli import cli
from chh_collector.crawler.models import CrawlStats
from chh_collector.logger import configure
from chh_collector.scrapers.rapzilla import MusicData

cli_module = importlib.import_module("chh_collector.cli")

RELEASE = "http://www.rapzilla.com/rz/music/freemp3s/4241-never-land"


@pytest.fixture(autouse=True)
def restore_logging():
    """CliRunner закрывает свои потоки; возвращаем обработчик логов на sys.stderr."""
    yield
    configure()


@pytest.fixture(autouse=True)
def patch_start_crawl(monkeypatch):
    """Патчим start_crawl: visitor получает одну запись без сетевых запросов."""
    seen = {}

    async def fake_crawl(cfg, visitor):
        seen["config"] = cfg
        seen["limit"] = visitor.limit
        visitor.records.append(MusicData(url=RELEASE, project="Never Land", artist="Lecrae", date="2016"))
        return CrawlStats(total_links_visited=3)

    monkeypatch.setattr(cli_module, "start_crawl", fake_crawl)
    return seen


@pytest.fixture()
def cfg_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "seed_urls": ["http://www.rapzilla.com/rz/music/freemp3s/download-list"],
                "follow_external_links": True,
                "scrape_seed_urls": False,
                "request_delay": 0.5,
            }
        ),
        encoding="utf-8",
    )
    return path


def test_version_option():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "CHH Collector" in result.output


def test_show_config(cfg_file):
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["seed_urls"] == ["http://www.rapzilla.com/rz/music/freemp3s/download-list"]
    assert data["request_delay"] == 0.5


def test_crawl_stdout(cfg_file, patch_start_crawl):
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "crawl", "--limit", "5"])
    assert result.exit_code == 0
    output = json.loads(result.output)
    assert output == [{"url": RELEASE, "project": "Never Land", "artist": "Lecrae", "date": "2016"}]
    assert patch_start_crawl["limit"] == 5
    assert patch_start_crawl["config"].follow_external_links is True


def test_crawl_json_file(cfg_file, tmp_path):
    out = tmp_path / "reports" / "music.json"
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "crawl", "--json", str(out)])
    assert result.exit_code == 0
    assert "Total links visited: 3" in result.output
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data[0]["artist"] == "Lecrae"


def test_crawl_timeout(monkeypatch, cfg_file):
    async def slow(cfg, visitor):
        await asyncio.sleep(2)
        return CrawlStats()

    monkeypatch.setattr(cli_module, "start_crawl", slow)

    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "crawl", "--crawl-timeout", "0.2"])
    assert result.exit_code == 1
    assert "не завершён" in result.output


def test_crawl_failure_reported(monkeypatch, cfg_file):
    async def broken(cfg, visitor):
        raise RuntimeError("network is down")

    monkeypatch.setattr(cli_module, "start_crawl", broken)

    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "crawl"])
    assert result.exit_code == 1
    assert "network is down" in result.output


def test_invalid_limit_rejected(cfg_file):
    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "crawl", "--limit", "0"])
    assert result.exit_code == 2


def test_bad_config(tmp_path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("seed_urls: []", encoding="utf-8")
    result = CliRunner().invoke(cli, ["--config", str(bad), "config"])
    assert result.exit_code == 1
    assert "Ошибка загрузки конфигурации" in result.output
