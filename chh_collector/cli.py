#!/usr/bin/env python3
"""
Точка входа для запуска краулера CHH Collector через командную строку.

Команды:
  crawl     Обойти сайт по конфигу и вывести/сохранить найденные релизы
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (только консоль, если не указан)
  --log-format FORMAT Формат логирования

Команда crawl опции:
  --limit INT           Остановить обход после N найденных релизов
  --json PATH           Сохранить JSON-отчёт в файл
  --pretty              Преформатировать JSON-вывод (отступ 2)
  --crawl-timeout SEC   Таймаут всего обхода (секунд)

Пример:
  chh-collector crawl --config configs/default.yaml --json music.json --limit 10
"""
import asyncio
import json
import sys
from pathlib import Path

import click

from chh_collector import __version__
from chh_collector.config import load_config
from chh_collector.engine import start_crawl
from chh_collector.logger import DEFAULT_FORMAT, init_logging
from chh_collector.report.json_report import records_to_list, render_json
from chh_collector.scrapers.rapzilla import RapzillaVisitor

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='CHH Collector, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default='configs/default.yaml',
    show_default=True,
    type=click.Path(dir_okay=False, path_type=Path),
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
    help='Путь к файлу логов (только консоль, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд CHH Collector CLI."""
    init_logging(level=log_level, log_file=log_file, log_format=log_format)
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.option(
    '--limit', '-l', 'limit',
    type=click.IntRange(min=1),
    default=None,
    help='Остановить обход после N найденных релизов'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-вывод (отступ 2)'
)
@click.option(
    '--crawl-timeout', 'crawl_timeout',
    type=float,
    default=None,
    help='Таймаут всего обхода (секунд)'
)
@click.pass_context
def crawl(ctx, limit, json_output, pretty, crawl_timeout):
    """Обойти сайт и собрать данные о релизах."""
    cfg = ctx.obj['config']
    visitor = RapzillaVisitor(limit=limit)
    try:
        if crawl_timeout:
            stats = asyncio.run(
                asyncio.wait_for(start_crawl(cfg, visitor), timeout=crawl_timeout)
            )
        else:
            stats = asyncio.run(start_crawl(cfg, visitor))
    except asyncio.TimeoutError:
        print_error(f'Обход не завершён за {crawl_timeout} секунд')
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    # Без файла печатаем только JSON в stdout
    if not json_output:
        indent = 2 if pretty else None
        click.echo(json.dumps(records_to_list(visitor.records), ensure_ascii=False, indent=indent))
        return

    try:
        saved_json = render_json(visitor.records, json_output, pretty=pretty)
    except OSError as e:
        print_error(f'Ошибка при сохранении JSON: {e}')
    click.echo(f'JSON report: {saved_json}')
    click.echo(f'Total links visited: {stats.total_links_visited}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
