# === FILE: akamai_watch/cli.py ===
#!/usr/bin/env python3
"""
Точка входа AkamaiWatch для командной строки.

Команды:
  check     Один проход по всем сайтам из конфига, вывод/сохранение изменений
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)
  --log-format FORMAT Формат логирования

Команда check опции:
  --json PATH         Сохранить найденные изменения в JSON-файл
  --pretty            Преформатировать JSON-вывод (отступ 2)
  --timeout SEC       Таймаут всего прохода (секунд)

Периодический запуск (cron, systemd-timer и т.п.) остаётся за вызывающей стороной.

Пример:
  python -m akamai_watch.cli --config configs/default.yaml check --pretty
"""
import asyncio
import json
import sys
from pathlib import Path

import click

from akamai_watch import __version__
from akamai_watch.config import load_config
from akamai_watch.engine import check_sites
from akamai_watch.logger import DEFAULT_FORMAT, init_logging
from akamai_watch.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='AkamaiWatch, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default='configs/default.yaml',
    show_default=True,
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
    """Группа команд AkamaiWatch CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('check', context_settings=CONTEXT_SETTINGS)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить найденные изменения в JSON-файл'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-вывод (отступ 2)'
)
@click.option(
    '--timeout', 'pass_timeout',
    type=float,
    default=None,
    help='Таймаут всего прохода (секунд)'
)
@click.pass_context
def check(ctx, json_output, pretty, pass_timeout):
    """Проверить все сайты один раз и вывести изменившиеся скрипты.

    Логи тоже пишутся в stdout: для чистого JSON используйте --json PATH
    или --log-level WARNING.
    """
    cfg = ctx.obj['config']
    try:
        if pass_timeout is not None:
            changes = asyncio.run(
                asyncio.wait_for(check_sites(cfg), timeout=pass_timeout)
            )
        else:
            changes = asyncio.run(check_sites(cfg))
    except asyncio.TimeoutError:
        print_error(f'Проверка не завершена за {pass_timeout} секунд')
    except Exception as e:
        print_error(f'Ошибка при проверке: {e}')

    if json_output:
        try:
            saved = render_json(changes, json_output)
            click.echo(f'JSON report: {saved}')
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')
        return

    indent = 2 if pretty else None
    payload = [change.as_payload() for change in changes]
    click.echo(json.dumps(payload, ensure_ascii=False, indent=indent))


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
