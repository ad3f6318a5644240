# === FILE: site_crawler/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска краулера SiteCrawler через командную строку.

Команды:
  crawl URL   Обойти все страницы сайта с тем же origin и вывести/сохранить результаты
  config      Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (только stderr, если не указан)
  --log-format FORMAT Формат логирования (e.g. "%(asctime)s %(levelname)s %(message)s")

Команда crawl опции:
  --csv PATH          Сохранить таблицу результатов в CSV
  --json PATH         Сохранить JSON-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --template DIR      Папка с Jinja2-шаблоном report.html.j2
  --pretty            Преформатировать JSON-вывод (отступ 2)
  --batch-size N      Число одновременных запросов в раунде (override batch_size)
  --crawl-timeout SEC Таймаут всего обхода (секунд)
  --quiet             Не печатать прогресс

Дополнительно:
  --version, -v       Показать версию SiteCrawler

Пример:
  site-crawler crawl https://example.com --csv crawl-results.csv
"""
import asyncio
import json
import sys
from pathlib import Path

import click

from site_crawler import __version__
from site_crawler.config import load_config
from site_crawler.crawler.link_extractor import validate_seed
from site_crawler.crawler.models import InvalidSeedError, PageResult
from site_crawler.crawler.state import CrawlProgress
from site_crawler.logger import DEFAULT_FORMAT, configure, logger
from site_crawler.report.csv_report import render_csv
from site_crawler.report.html_report import render_html
from site_crawler.report.json_report import render_json
from site_crawler.scanner import start_crawl

CONTEXT_SETTINGS = dict(help_option_names=["--help"])
CRAWL_FAILED_MESSAGE = "Error crawling website. Please check the URL and try again."


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def echo_progress(result: PageResult, progress: CrawlProgress) -> None:
    click.echo(
        f'[{progress.scanned_count}/{progress.total_found}] {result.status} {result.url}',
        err=True,
    )


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteCrawler, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML или JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (только stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд SiteCrawler CLI."""
    configure(
        level=log_level,
        log_file=log_file,
        log_format=log_format,
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.option(
    '--csv', 'csv_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить таблицу результатов в CSV'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблоном (по умолчанию шаблон из пакета)'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-вывод (отступ 2)'
)
@click.option(
    '--batch-size', '-b', 'batch_size',
    type=click.IntRange(min=1),
    default=None,
    help='Число одновременных запросов в раунде'
)
@click.option(
    '--crawl-timeout', 'crawl_timeout',
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help='Таймаут всего обхода (секунд)'
)
@click.option(
    '--quiet', '-q', is_flag=True,
    help='Не печатать прогресс и итоговую сводку'
)
@click.pass_context
def crawl(ctx, url, csv_output, json_output, html_output, template_dir, pretty,
          batch_size, crawl_timeout, quiet):
    """Обойти сайт начиная с URL и сгенерировать отчёты."""
    cfg = ctx.obj['config']
    if batch_size is not None:
        cfg = cfg.model_copy(update={'batch_size': batch_size})

    try:
        seed = validate_seed(url)
    except InvalidSeedError as e:
        print_error(str(e))

    if not quiet:
        click.echo(f'Starting crawl: {seed}', err=True)
    on_result = None if quiet else echo_progress

    try:
        if crawl_timeout is not None:
            report = asyncio.run(
                asyncio.wait_for(start_crawl(cfg, seed, on_result=on_result), timeout=crawl_timeout)
            )
        else:
            report = asyncio.run(start_crawl(cfg, seed, on_result=on_result))
    except asyncio.TimeoutError:
        print_error(f'Обход не завершён за {crawl_timeout} секунд')
    except InvalidSeedError as e:
        print_error(str(e))
    except Exception as e:
        logger.error('Crawl of %s failed: %s', seed, e)
        print_error(CRAWL_FAILED_MESSAGE)

    if not quiet:
        summary = report.summary()
        click.echo(
            f'Pages scanned: {report.progress.scanned_count}, '
            f'total links found: {report.progress.total_found} '
            f'(ok: {summary["ok"]}, not found: {summary["not_found"]}, errors: {summary["errors"]})',
            err=True,
        )

    # Если не сохраняем в файл — печатаем в stdout
    if not (csv_output or json_output or html_output):
        indent = 2 if pretty else None
        click.echo(json.dumps(report.rows(), ensure_ascii=False, indent=indent))
        return

    if csv_output:
        try:
            saved_csv = render_csv(report, csv_output)
            click.echo(f'CSV report: {saved_csv}')
        except OSError as e:
            print_error(f'Ошибка при сохранении CSV: {e}')

    if json_output:
        try:
            saved_json = render_json(report, json_output)
            click.echo(f'JSON report: {saved_json}')
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(report, html_output, template_dir)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
