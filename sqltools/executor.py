from __future__ import annotations
import typing as t

from sqltools.utils import bind_params, placeholders, strip_terminator


class QueryResult:
    """Column headers plus rows; every cell is text or ``None`` for NULL."""

    def __init__(
        self,
        headers: list[str],
        rows: list[list[str | None]],
        rowcount: int = -1,
    ) -> None:
        self.headers: list[str] = headers
        self.rows: list[list[str | None]] = rows
        self.rowcount: int = rowcount

    @property
    def has_result_set(self) -> bool:
        """False for statements that produced no result set (DDL, DML)."""
        return bool(self.headers)

    def as_table(self) -> list[list[str | None]]:
        return [list(self.headers), *self.rows]


def _to_text(value: t.Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def execute_query(
    cur,
    stmt: str,
    params: t.Mapping[str, t.Any] | None = None,
) -> QueryResult:
    """
    Run one split statement on *cur* and collect its result set as text.
    Driver errors are left to the caller.
    """
    sql = strip_terminator(stmt)
    names = placeholders(sql)
    if names:
        bound = bind_params(sql, params)
        cur.execute(bound, {n: params[n] for n in names})
    else:
        cur.execute(sql)

    if not cur.description:
        return QueryResult([], [], rowcount=cur.rowcount)

    headers = [col[0] for col in cur.description]
    rows = [[_to_text(v) for v in row] for row in cur.fetchall()]
    return QueryResult(headers, rows, rowcount=len(rows))
