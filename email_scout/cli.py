# === FILE: email_scout/cli.py ===
#!/usr/bin/env python3
"""
Command line entry point for EmailScout.

Commands:
  crawl     Crawl a website for email addresses and print/save the result
  sanitize  Replace em-dashes in text with spaces
  serve     Run the HTTP API
  config    Show the effective configuration

Global options:
  --config PATH       Path to a YAML/JSON config (default: configs/default.yaml if present)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Extra log file (logs always go to stderr)
  --log-format FORMAT Logging format string

crawl options:
  --limit INT         Page budget (override page_budget)
  --concurrency INT   Number of workers (override concurrency)
  --timeout SEC       Per-request timeout (override timeout)
  --retries INT       Retries per URL (override max_retries)
  --json PATH         Save JSON report
  --csv PATH          Save CSV report
  --html PATH         Save HTML report
  --template DIR      Directory with Jinja2 templates
  --pretty            Indent JSON printed to stdout
  --crawl-timeout SEC Timeout for the whole crawl

Other:
  --version, -v       Show EmailScout version

Example:
  email-scout crawl https://example.com --limit 50 --csv emails.csv
"""
import asyncio
import json
import sys
from pathlib import Path

import click

from email_scout import __version__
from email_scout.config import load_config
from email_scout.crawler.models import InvalidStartURL
from email_scout.logger import init_logging
from email_scout.report import render_csv, render_html, render_json
from email_scout.sanitizer import sanitize_text
from email_scout.scanner import start_crawl
from email_scout.server import run_server

CONTEXT_SETTINGS = dict(help_option_names=["--help"])

def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)

@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='EmailScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON config file.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Extra log file (stderr only if omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Logging format string'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """EmailScout command group."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format,
        stream=sys.stderr,
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Failed to load configuration: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg

@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.option('--limit', '-l', 'limit', type=click.IntRange(min=1), default=None,
              help='Page budget (override page_budget)')
@click.option('--concurrency', 'concurrency', type=click.IntRange(min=1), default=None,
              help='Number of workers (override concurrency)')
@click.option('--timeout', 'timeout', type=click.FloatRange(min=0, min_open=True), default=None,
              help='Per-request timeout in seconds (override timeout)')
@click.option('--retries', 'retries', type=click.IntRange(min=0), default=None,
              help='Retries per URL (override max_retries)')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save JSON report'
)
@click.option(
    '--csv', 'csv_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save CSV report'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save HTML report'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Directory with Jinja2 templates (bundled templates if omitted)'
)
@click.option(
    '--pretty', is_flag=True,
    help='Indent JSON output (2 spaces)'
)
@click.option(
    '--crawl-timeout', 'crawl_timeout',
    type=float,
    default=None,
    help='Timeout for the whole crawl (seconds)'
)
@click.pass_context
def crawl(ctx, url, limit, concurrency, timeout, retries, json_output, csv_output,
          html_output, template_dir, pretty, crawl_timeout):
    """Crawl URL for email addresses and output the result."""
    overrides = {
        'page_budget': limit,
        'concurrency': concurrency,
        'timeout': timeout,
        'max_retries': retries,
    }
    cfg = ctx.obj['config'].model_copy(
        update={k: v for k, v in overrides.items() if v is not None}
    )
    url = url.strip()
    try:
        if crawl_timeout:
            result = asyncio.run(
                asyncio.wait_for(start_crawl(url, cfg), timeout=crawl_timeout)
            )
        else:
            result = asyncio.run(start_crawl(url, cfg))
    except InvalidStartURL as e:
        print_error(f'Invalid URL: {e}')
    except asyncio.TimeoutError:
        print_error(f'Crawl did not finish within {crawl_timeout} seconds')
    except Exception as e:
        print_error(f'Crawl failed: {e}')

    # No report files requested: print to stdout
    if not (json_output or csv_output or html_output):
        indent = 2 if pretty else None
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=indent))
        return

    reports = (
        ('JSON', json_output, lambda p: render_json(result, p)),
        ('CSV', csv_output, lambda p: render_csv(result, p)),
        ('HTML', html_output, lambda p: render_html(result, template_dir, p)),
    )
    for label, path, render in reports:
        if not path:
            continue
        try:
            saved = render(path)
            click.echo(f'{label} report: {saved}')
        except Exception as e:
            print_error(f'Failed to save {label} report: {e}')

@cli.command('sanitize', context_settings=CONTEXT_SETTINGS)
@click.argument('text', required=False)
def sanitize(text):
    """Replace em-dashes with spaces in TEXT (or stdin)."""
    if text is None:
        text = click.get_text_stream('stdin').read()
    try:
        click.echo(sanitize_text(text), nl=False)
    except ValueError as e:
        print_error(str(e))
    if not text.endswith('\n'):
        click.echo()

@cli.command('serve', context_settings=CONTEXT_SETTINGS)
@click.option('--host', default='127.0.0.1', show_default=True, help='Interface to bind')
@click.option('--port', default=8080, show_default=True, type=int, help='Port to listen on')
@click.pass_context
def serve(ctx, host, port):
    """Run the HTTP API."""
    run_server(ctx.obj['config'], host=host, port=port)

@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Show the effective configuration as JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))

if __name__ == "__main__":
    cli()
