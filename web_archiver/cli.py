#!/usr/bin/env python3
"""
Точка входа для запуска WebArchiver через командную строку.

Команды:
  crawl     Обойти сайт и сохранить JSON-корпус
  config    Показать итоговую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (необязательно)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)
  --log-format FORMAT Формат логирования

Стартовый URL берётся из аргумента, переменной окружения
WEB_ARCHIVER_BASE_URL или поля base_url конфига (в этом порядке).

Пример:
  web-archiver crawl https://docs.example.com/guide --output-dir ./archived_data
"""
import asyncio
import sys
from pathlib import Path

import click

from web_archiver import __version__
from web_archiver.config import ArchiverConfig, load_config
from web_archiver.engine import start_archive
from web_archiver.logger import DEFAULT_FORMAT, configure, logger

CONTEXT_SETTINGS = dict(help_option_names=["--help"])
BASE_URL_ENVVAR = "WEB_ARCHIVER_BASE_URL"


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _build_config(ctx: click.Context, **overrides) -> ArchiverConfig:
    try:
        return load_config(ctx.obj['config_path'], **overrides)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')


seed_argument = click.argument('seed_url', required=False, envvar=BASE_URL_ENVVAR)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='WebArchiver, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML или JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stdout, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Архивирует текст сайта в один JSON-файл для LLM."""
    configure(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format,
    )
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@seed_argument
@click.option(
    '--output-dir', '-o', 'output_dir',
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help='Каталог для JSON-корпуса (default: ./archived_data)'
)
@click.option('--user-agent', 'user_agent', default=None, help='Заголовок User-Agent')
@click.option(
    '--timeout', 'timeout',
    type=float,
    default=None,
    help='Таймаут одного запроса (секунд)'
)
@click.pass_context
def crawl(ctx, seed_url, output_dir, user_agent, timeout):
    """Обойти сайт, начиная с SEED_URL, и сохранить корпус."""
    cfg = _build_config(
        ctx,
        base_url=seed_url,
        output_dir=output_dir,
        user_agent=user_agent,
        timeout=timeout,
    )
    click.echo(f'Starting crawl: {cfg.base_url}')
    try:
        path = asyncio.run(start_archive(cfg))
    except Exception as e:
        logger.error("Archiving failed: %s", e)
        print_error(f'Ошибка при архивации: {e}')
    click.echo(f'Corpus saved: {path}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@seed_argument
@click.pass_context
def show_config(ctx, seed_url):
    """Показать итоговую конфигурацию в JSON."""
    cfg = _build_config(ctx, base_url=seed_url)
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
