#!/usr/bin/env python3
"""
sqltools – run SQL files and export every result set.

    sqltools query -c sqltools.config.yml -d default -f excel report.sql
    sqltools query -p dept=SALES -p min_salary=5000 examples/query-param.sql
    sqltools split report.sql

Each statement of each file produces ``<file>_<timestamp>_<n>.<ext>`` in the
output directory (``./output`` unless ``-o`` says otherwise).
"""
from __future__ import annotations

import pathlib
import sys

import click
import mysql.connector

from sqltools import __version__
from sqltools.config import ConfigError, load
from sqltools.constants import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_DATABASE_KEY,
    DEFAULT_FORMAT,
    DEFAULT_OUTPUT_DIR,
    FORMATS,
)
from sqltools.reader import SqlFile
from sqltools.runner import QueryRunner
from sqltools.utils import MissingParameterError, parse_param


def _parse_params(_ctx, _param, values) -> dict[str, str]:
    params: dict[str, str] = {}
    for raw in values:
        try:
            key, value = parse_param(raw)
        except ValueError as exc:
            raise click.BadParameter(str(exc)) from exc
        params[key] = value
    return params


def _fail(exc: BaseException) -> None:
    click.echo(f"Error: {exc}", err=True)
    sys.exit(1)


@click.group()
def main():
    """Execute SQL files and export their results."""


@main.command()
def version():
    click.echo(__version__)


@main.command()
@click.option(
    "-c", "--config", "config_path",
    type=click.Path(dir_okay=False), default=str(DEFAULT_CONFIG_FILE),
    show_default=True, help="database config (YAML or TOML)",
)
@click.option(
    "-d", "--database", "database_key",
    default=DEFAULT_DATABASE_KEY, show_default=True,
    help="database configuration key",
)
@click.option(
    "-o", "--output-dir",
    type=click.Path(file_okay=False), default=str(DEFAULT_OUTPUT_DIR),
    show_default=True,
)
@click.option(
    "-f", "--format", "fmt",
    type=click.Choice(sorted(FORMATS)), default=DEFAULT_FORMAT, show_default=True,
)
@click.option(
    "-p", "--param", "params", multiple=True, callback=_parse_params,
    help="bind :name placeholders, e.g. -p dept=SALES",
)
@click.option("--dry-run", is_flag=True, help="print statements, do not connect")
@click.argument("sql_files", nargs=-1, required=True, type=click.Path())
def query(config_path, database_key, output_dir, fmt, params, dry_run, sql_files):
    """Execute SQL_FILES and export each result set."""
    try:
        db = None if dry_run else load(config_path, database_key)
        runner = QueryRunner(db, pathlib.Path(output_dir), fmt, params)
        written = runner.run(sql_files, dry_run=dry_run)
    except (ConfigError, MissingParameterError, OSError, UnicodeDecodeError,
            mysql.connector.Error) as exc:
        _fail(exc)
    else:
        if not dry_run:
            click.echo(f"✅  {len(written)} file(s) written to {output_dir}")


@main.command()
@click.argument("sql_file", type=click.Path(exists=True, dir_okay=False))
def split(sql_file):
    """Print the statements SQL_FILE splits into."""
    try:
        sf = SqlFile(pathlib.Path(sql_file))
    except (OSError, UnicodeDecodeError) as exc:
        _fail(exc)
        return

    for w in sf.split.warnings:
        click.echo(f"[WARN] {w}", err=True)
    for idx, stmt in enumerate(sf.statements, start=1):
        click.echo(f"-- [{idx}]")
        click.echo(stmt)


if __name__ == "__main__":
    main()
