from __future__ import annotations
import datetime as dt
import pathlib
import time
import typing as t

import click

from sqltools.config import Database
from sqltools.constants import TIMESTAMP_FMT
from sqltools.driver import connection
from sqltools.executor import execute_query
from sqltools.exporters import export, extension
from sqltools.reader import SqlFile, discover


class QueryRunner:
    """
    Runs every statement of one or more SQL files against *db* and writes one
    export per result set into *output_dir*
    (``<stem>_<YYYYMMDD_HHMMSS>_<n>.<ext>``).
    """

    def __init__(
        self,
        db: Database | None,
        output_dir: pathlib.Path,
        fmt: str,
        params: t.Mapping[str, t.Any] | None = None,
        clock: t.Callable[[], dt.datetime] = dt.datetime.now,
    ) -> None:
        self.db: Database | None = db
        self.output_dir: pathlib.Path = output_dir
        self.fmt: str = fmt
        self.ext: str = extension(fmt)
        self.params: dict[str, t.Any] = dict(params or {})
        self.clock = clock

    def load(self, paths: t.Iterable[pathlib.Path | str]) -> list[SqlFile]:
        files = [SqlFile(p) for p in discover(paths)]
        for sf in files:
            for w in sf.split.warnings:
                click.echo(f"[WARN] {sf.path.name}: {w}", err=True)
        return files

    def run(
        self,
        paths: t.Iterable[pathlib.Path | str],
        *,
        dry_run: bool = False,
    ) -> list[pathlib.Path]:
        files = self.load(paths)

        if dry_run:
            for sf in files:
                click.echo(f"-- {sf.path.name}: {len(sf.statements)} statement(s)")
                for stmt in sf.statements:
                    click.echo(stmt)
            click.echo("\n-- DRY‑RUN complete (no statements executed)")
            return []

        if self.db is None:
            raise RuntimeError("No database configured")

        self.output_dir.mkdir(parents=True, exist_ok=True)
        written: list[pathlib.Path] = []
        with connection(self.db) as conn, conn.cursor() as cur:
            for sf in files:
                written.extend(self._run_file(cur, sf))
        return written

    def _run_file(self, cur, sf: SqlFile) -> list[pathlib.Path]:
        click.echo(f"▶ {sf.path.name}  ({len(sf.statements)} statement(s))")
        stamp = self.clock().strftime(TIMESTAMP_FMT)
        written: list[pathlib.Path] = []

        for idx, stmt in enumerate(sf.statements, start=1):
            start = time.perf_counter()
            result = execute_query(cur, stmt, self.params)
            duration_ms = int((time.perf_counter() - start) * 1000)

            if not result.has_result_set:
                click.echo(
                    f"  [{idx}] no result set ({result.rowcount} row(s) affected, {duration_ms} ms)"
                )
                continue

            target = self.output_dir / f"{sf.stem}_{stamp}_{idx}.{self.ext}"
            export(result, target, self.fmt)
            written.append(target)
            click.echo(f"  [{idx}] {len(result.rows)} row(s) → {target}  ({duration_ms} ms)")
        return written
