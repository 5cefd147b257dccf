from __future__ import annotations
import pathlib
import typing as t

from sqltools.splitter import SplitResult, split_sql


class SqlFile:
    """One SQL source file on disk, already split into statements."""

    def __init__(self, path: pathlib.Path) -> None:
        self.path: pathlib.Path = path
        self.stem: str = path.name[:-4] if path.name.lower().endswith(".sql") else path.name
        with path.open(encoding="utf-8") as fh:
            self.lines: list[str] = [line.rstrip("\n") for line in fh]
        self.split: SplitResult = split_sql(self.lines)

    @property
    def statements(self) -> list[str]:
        return self.split.statements


def discover(paths: t.Iterable[pathlib.Path | str]) -> list[pathlib.Path]:
    """
    Expand *paths* in the order given.  A directory contributes its ``*.sql``
    files sorted by name; anything else is passed through as‑is so that a
    missing file surfaces as an error when it is read.
    """
    found: list[pathlib.Path] = []
    for p in map(pathlib.Path, paths):
        if p.is_dir():
            found.extend(sorted(f for f in p.iterdir() if f.suffix.lower() == ".sql"))
        else:
            found.append(p)
    return found
