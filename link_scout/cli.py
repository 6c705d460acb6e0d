# === FILE: link_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска LinkScout через командную строку.

Crawls a site from a root URL up to a depth limit and logs every broken link
(HTTP 4xx/5xx) found on the crawled pages.

Опции:
  -url, --url URL         Корневой URL (обязательно, либо root_url в конфиге)
  -depth, --depth INT     Максимальная глубина обхода (default: 1)
  -verbose[=BOOL]         Логировать каждую проверку ссылки
  --config PATH           YAML/JSON файл с настройками
  --timeout SEC           Таймаут на один запрос (по умолчанию без таймаута)
  --max-concurrency N     Ограничение одновременных запросов (по умолчанию нет)
  --check-method METHOD   GET или HEAD для проверки ссылок
  --json / --pretty       Вывести итоговый отчёт в JSON на stdout
  --show-config           Показать итоговую конфигурацию и выйти
  --log-level / --log-file / --log-format
  --version               Показать версию LinkScout

Пример:
  link-scout -url https://example.com -depth 2 -verbose
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from link_scout import __version__
from link_scout.config import load_config
from link_scout.engine import start_crawl
from link_scout.logger import init_logging

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', message='LinkScout, version %(version)s')
@click.option('--url', '-url', 'url', default=None, help='Корневой URL для обхода.')
@click.option('--depth', '-depth', 'depth', type=int, default=None,
              help='Максимальная глубина обхода (default: 1).')
@click.option('--verbose', '-verbose', 'verbose', type=click.BOOL,
              is_flag=False, flag_value=True, default=None,
              help='Логировать отправку и результат каждой проверки ссылки '
                   '(-verbose, -verbose=true, -verbose=false).')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option('--timeout', 'timeout', type=float, default=None,
              help='Таймаут на один запрос (секунд).')
@click.option('--max-concurrency', 'max_concurrency', type=int, default=None,
              help='Макс. число одновременных запросов.')
@click.option('--check-method', 'check_method', default=None,
              type=click.Choice(['GET', 'HEAD'], case_sensitive=False),
              help='HTTP-метод для проверки ссылок (default: GET).')
@click.option('--json', 'json_output', is_flag=True,
              help='Вывести отчёт в JSON на stdout (логи уходят в stderr).')
@click.option('--pretty', is_flag=True, help='Преформатировать JSON-вывод (отступ 2).')
@click.option('--show-config', 'show_config', is_flag=True,
              help='Показать итоговую конфигурацию в JSON и выйти.')
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
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
def cli(url, depth, verbose, config_path, timeout, max_concurrency, check_method,
        json_output, pretty, show_config, log_level, log_file, log_format):
    """Find broken links on a site by crawling it from URL."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format,
        stream=sys.stderr if json_output else None,
    )
    if url is None and config_path is None:
        print_error('The -url flag is required.')
    if depth is not None and depth < 0:
        print_error('The -depth flag must be a non-negative integer.')

    try:
        cfg = load_config(
            config_path,
            root_url=url,
            max_depth=depth,
            verbose=verbose,
            timeout=timeout,
            max_concurrency=max_concurrency,
            check_method=check_method.upper() if check_method else None,
        )
    except ValidationError as e:
        print_error(f'Invalid configuration: {e}')
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')

    if show_config:
        click.echo(cfg.model_dump_json(indent=2))
        return

    try:
        report = asyncio.run(start_crawl(cfg))
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    if json_output:
        click.echo(report.json(pretty=pretty))


if __name__ == "__main__":
    cli()
