# === FILE: link_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска краулера LinkScout через командную строку.

Команды:
  crawl     Обойти сайт начиная с URL и сохранить JSON-отчёт
  config    Показать итоговую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)
  --log-format FORMAT Формат логирования

Команда crawl опции:
  URL                 Стартовый URL (если не задан ни здесь, ни в конфиге — спросим)
  --depth INT         Максимальная глубина (override max_depth)
  --rate FLOAT        Запросов в секунду (override requests_per_second)
  --timeout SEC       Таймаут одного запроса
  --output PATH       Файл JSON-отчёта (default: crawl_results.json)
  --html PATH         Дополнительно сохранить HTML-отчёт
  --template DIR      Папка с шаблоном report.html.j2

Пример:
  link_scout crawl https://example.com --depth 2 --rate 4 -o results.json
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from link_scout import __version__
from link_scout.config import build_config, read_config_file
from link_scout.engine import start_crawl
from link_scout.errors import ReportError
from link_scout.logger import DEFAULT_FORMAT, configure
from link_scout.report.html_report import render_html
from link_scout.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _format_validation_error(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}" for err in exc.errors()
    )


def _read_config(ctx) -> dict:
    try:
        return read_config_file(ctx.obj['config_path'])
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')


def _build(data: dict, **overrides):
    try:
        return build_config(data, **overrides)
    except ValidationError as e:
        print_error(f'Ошибка конфигурации: {_format_validation_error(e)}')


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='LinkScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
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
    type=click.Path(dir_okay=False, path_type=Path),
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
    """Группа команд LinkScout CLI."""
    configure(level=log_level, log_file=log_file, log_format=log_format)
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('url', required=False)
@click.option('--depth', '-d', 'max_depth', type=int, default=None, help='Максимальная глубина обхода')
@click.option('--rate', '-r', 'requests_per_second', type=float, default=None, help='Запросов в секунду')
@click.option('--timeout', 'timeout', type=float, default=None, help='Таймаут одного запроса (секунд)')
@click.option(
    '--output', '-o', 'output',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Файл JSON-отчёта (перезаписывается)'
)
@click.option(
    '--html', 'html_output',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблоном report.html.j2'
)
@click.pass_context
def crawl(ctx, url, max_depth, requests_per_second, timeout, output, html_output, template_dir):
    """Обойти сайт и сохранить отчёт."""
    data = _read_config(ctx)
    if url is None and not data.get('base_url'):
        url = click.prompt('Enter the base URL')
    cfg = _build(
        data,
        base_url=url,
        max_depth=max_depth,
        requests_per_second=requests_per_second,
        timeout=timeout,
        output=output,
    )

    click.echo(f'Starting crawler: {cfg.base_url} (depth {cfg.max_depth}, {cfg.requests_per_second} req/s)')
    try:
        report = asyncio.run(start_crawl(cfg))
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    click.echo(f'Crawling completed. Pages recorded: {report.total_pages}')

    try:
        saved_json = render_json(report, cfg.output)
    except ReportError as e:
        print_error(f'Ошибка при сохранении JSON: {e}')
    click.echo(f'Results saved to {saved_json}')

    if html_output:
        try:
            saved_html = render_html(report, template_dir, html_output)
        except ReportError as e:
            print_error(f'Ошибка при сохранении HTML: {e}')
        click.echo(f'HTML report: {saved_html}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = _build(_read_config(ctx))
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
