# File: tests/test_cli.py
"""Тесты для CLI (`web_archiver/cli.py`) с использованием click.testing.CliRunner.
Проверяют команды `crawl`, `config`, `--version`, а также обработку ошибок.
"""
import json

import pytest
import web_archiver.cli as cli_module
from click.testing import CliRunner
from web_archiver.cli import BASE_URL_ENVVAR, cli
from web_archiver.errors import StorageError
from web_archiver.logger import configure


@pytest.fixture(autouse=True)
def restore_logging():
    """CLI вешает обработчик на stdout CliRunner; после теста возвращаем обычный."""
    yield
    configure()


@pytest.fixture()
def captured(monkeypatch):
    """Патчим start_archive: запоминаем конфиг и ничего не скачиваем."""
    seen = {}

    async def fake_archive(cfg):
        seen["config"] = cfg
        return cfg.output_dir / "example.com.json"

    monkeypatch.setattr(cli_module, "start_archive", fake_archive)
    monkeypatch.delenv(BASE_URL_ENVVAR, raising=False)
    return seen


def test_version_option():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "WebArchiver" in result.output


def test_crawl_seed_argument(captured, tmp_path):
    runner = CliRunner()
    result = runner.invoke(
        cli, ["crawl", "https://example.com/", "--output-dir", str(tmp_path), "--timeout", "3"]
    )
    assert result.exit_code == 0, result.output
    cfg = captured["config"]
    assert cfg.base_url == "https://example.com/"
    assert cfg.output_dir == tmp_path
    assert cfg.timeout == 3.0
    assert "Corpus saved" in result.output


def test_crawl_seed_from_env(captured):
    runner = CliRunner()
    result = runner.invoke(cli, ["crawl"], env={BASE_URL_ENVVAR: "https://env.example.com/docs"})
    assert result.exit_code == 0, result.output
    assert captured["config"].base_url == "https://env.example.com/docs"


def test_crawl_seed_from_config_file(captured, tmp_path):
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(
        "base_url: https://file.example.com/\nuser_agent: FileAgent/2.0\n", encoding="utf-8"
    )
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "crawl"])
    assert result.exit_code == 0, result.output
    assert captured["config"].base_url == "https://file.example.com/"
    assert captured["config"].user_agent == "FileAgent/2.0"


def test_crawl_without_seed_fails(captured):
    runner = CliRunner()
    result = runner.invoke(cli, ["crawl"])
    assert result.exit_code == 1
    assert "config" not in captured


def test_crawl_storage_error_exits_nonzero(monkeypatch, tmp_path):
    async def broken(cfg):
        raise StorageError(tmp_path, PermissionError("read-only"))

    monkeypatch.setattr(cli_module, "start_archive", broken)
    runner = CliRunner()
    result = runner.invoke(cli, ["crawl", "https://example.com/"])
    assert result.exit_code == 1
    assert "read-only" in result.output


def test_show_config(captured):
    runner = CliRunner()
    result = runner.invoke(cli, ["config", "https://example.com/docs"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["base_url"] == "https://example.com/docs"
    assert data["max_text_length"] == 120000
