"""
Generic helpers for preparing split statements before they reach the driver.
"""
from __future__ import annotations
import typing as t

import sqlparse
from sqlparse import tokens as T


class MissingParameterError(KeyError):
    """A ``:name`` placeholder has no value bound to it."""

    def __str__(self) -> str:
        return f"No value supplied for parameter :{self.args[0]}"


def strip_terminator(stmt: str) -> str:
    """Drop the single trailing ``;`` the splitter leaves on each statement."""
    stmt = stmt.strip()
    if stmt.endswith(";"):
        stmt = stmt[:-1].rstrip()
    return stmt


def placeholders(stmt: str) -> list[str]:
    """Names of the ``:name`` placeholders in *stmt*, in order of appearance."""
    names: list[str] = []
    for parsed in sqlparse.parse(stmt):
        for tok in parsed.flatten():
            if tok.ttype in T.Name.Placeholder and tok.value.startswith(":"):
                names.append(tok.value[1:])
    return names


def bind_params(stmt: str, params: t.Mapping[str, t.Any] | None) -> str:
    """
    Rewrite ``:name`` placeholders into mysql‑connector's ``%(name)s`` style.

    Tokenising with sqlparse keeps literals and comments intact, so a
    ``':x'`` string or a ``10:30`` time inside quotes is never touched.
    Everything else, ``%`` included, is passed through verbatim: the driver
    only substitutes ``%(name)s`` markers.
    """
    params = params or {}
    out: list[str] = []
    for parsed in sqlparse.parse(stmt):
        for tok in parsed.flatten():
            if tok.ttype in T.Name.Placeholder and tok.value.startswith(":"):
                name = tok.value[1:]
                if name not in params:
                    raise MissingParameterError(name)
                out.append(f"%({name})s")
            else:
                out.append(tok.value)
    return "".join(out)


def parse_param(text: str) -> tuple[str, str]:
    """Parse a ``key=value`` command-line parameter."""
    key, sep, value = text.partition("=")
    key = key.strip().lstrip(":")
    if not sep or not key:
        raise ValueError(f"Parameter {text!r} must look like key=value")
    return key, value
