"""
Split SQL source text into individually executable statements.

The scan is line oriented and aware of three things only:

• `--` comment lines and blank lines (skipped entirely)
• single / double quoted literals (a `\\` before a quote makes it literal)
• procedural blocks – a line starting with ``BEGIN`` / ``DECLARE`` opens one,
  a line reading exactly ``END;`` closes it

Nothing here touches the filesystem or prints; missing terminators are
reported back as :class:`SplitWarning` objects.
"""
from __future__ import annotations

import re
import typing as t

_QUOTES = ("'", '"')
_BLOCK_OPENERS = ("begin", "declare")
_BLOCK_CLOSER = "end;"

# only CR, LF and CRLF end a line; \f, \x85, \u2028 etc. are content
_NEWLINE_RE = re.compile(r"\r\n|\r|\n")
# control characters and space, the set a "trim" removes
_TRIM_CHARS = "".join(chr(c) for c in range(0x21))


class SplitWarning:
    """Advisory produced while splitting; never fatal."""

    def __init__(self, line_number: int, message: str) -> None:
        self.line_number: int = line_number
        self.message: str = message

    def __str__(self) -> str:
        return f"line {self.line_number}: {self.message}"

    def __repr__(self) -> str:
        return f"SplitWarning({self.line_number!r}, {self.message!r})"


class SplitResult:
    """Statements in source order plus any advisories raised on the way."""

    def __init__(
        self,
        statements: list[str] | None = None,
        warnings: list[SplitWarning] | None = None,
    ) -> None:
        self.statements: list[str] = statements if statements is not None else []
        self.warnings: list[SplitWarning] = warnings if warnings is not None else []

    def __iter__(self) -> t.Iterator[str]:
        return iter(self.statements)

    def __len__(self) -> int:
        return len(self.statements)

    def __getitem__(self, idx: int) -> str:
        return self.statements[idx]


class _ScanState:
    """
    Lexical state of one scan.

    ``quote`` holds the character that opened the current literal (``None``
    outside a literal); ``in_block`` is the procedural-block flag.  A
    statement boundary is only possible when both are cleared.
    """

    def __init__(self) -> None:
        self.quote: str | None = None
        self.in_block: bool = False

    @property
    def in_quote(self) -> bool:
        return self.quote is not None

    def on_quote(self, ch: str, escaped: bool) -> None:
        if escaped:
            return
        if self.quote is None:
            self.quote = ch
        elif ch == self.quote:
            self.quote = None

    def on_line(self, lowered: str) -> None:
        if self.in_quote:
            return
        if lowered.startswith(_BLOCK_OPENERS):
            self.in_block = True
        elif lowered == _BLOCK_CLOSER:
            self.in_block = False

    def at_boundary(self, ch: str) -> bool:
        return ch == ";" and not self.in_quote and not self.in_block


def _trim(text: str) -> str:
    return text.strip(_TRIM_CHARS)


def _lines(source: str | t.Iterable[str]) -> t.Iterable[str]:
    if isinstance(source, str):
        lines = _NEWLINE_RE.split(source)
        if lines and lines[-1] == "":
            lines.pop()
        return lines
    return source


def iter_statements(
    source: str | t.Iterable[str],
    on_warning: t.Callable[[SplitWarning], None] | None = None,
) -> t.Iterator[str]:
    """
    Lazily yield the statements of *source* (a string or an iterable of
    lines).  Each yielded statement is stripped and keeps its ``;``.

    When the input ends without a terminator the dangling text is yielded
    with a ``;`` appended and *on_warning* is called once.
    """
    state = _ScanState()
    buf: list[str] = []
    line_number = 0

    for raw in _lines(source):
        line_number += 1
        line = raw.rstrip("\r\n")
        trimmed = _trim(line)
        if not trimmed or trimmed.startswith("--"):
            continue

        lowered = trimmed.lower()
        for i, ch in enumerate(line):
            if ch in _QUOTES:
                state.on_quote(ch, escaped=i > 0 and line[i - 1] == "\\")
            state.on_line(lowered)
            buf.append(ch)
            if state.at_boundary(ch):
                stmt = _trim("".join(buf))
                if stmt:
                    yield stmt
                buf = []
        buf.append("\n")

    tail = _trim("".join(buf))
    if tail:
        if on_warning is not None:
            on_warning(
                SplitWarning(
                    line_number,
                    "statement not terminated at end of input – semicolon appended",
                )
            )
        yield tail + ";"


def split_sql(source: str | t.Iterable[str]) -> SplitResult:
    """Split *source* eagerly and return statements together with warnings."""
    result = SplitResult()
    result.statements.extend(iter_statements(source, result.warnings.append))
    return result
