# wavefront3d/parsing/tokens.py
"""
Общий токенайзер для OBJ и MTL.

Строка – это либо пустая строка, либо комментарий (`# ...`), либо
директива: ключевое слово и аргументы через пробельные символы.
`\\` в конце строки склеивает её со следующей.
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple

from wavefront3d.parsing.errors import MalformedDirective


class Directive(NamedTuple):
    line: int           # номер первой физической строки (1‑based)
    keyword: str
    args: tuple[str, ...]
    rest: str           # всё после ключевого слова, без крайних пробелов
    raw: str            # исходный текст директивы (после склейки)


def iter_directives(text: str) -> Iterator[Directive]:
    """Разбить текст на директивы, пропуская пустые строки и комментарии."""
    # UTF-8 BOM от некоторых экспортёров
    if text.startswith("\ufeff"):
        text = text[1:]
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")

    pending: list[str] = []
    start = 0
    for number, line in enumerate(lines, start=1):
        if not pending:
            start = number
        stripped = line.rstrip()
        if stripped.endswith("\\"):
            pending.append(stripped[:-1])
            continue
        pending.append(line)
        joined = " ".join(pending)
        pending = []

        directive = _make_directive(start, joined)
        if directive is not None:
            yield directive

    # файл закончился на `\` – хвост всё равно разбираем
    if pending:
        directive = _make_directive(start, " ".join(pending))
        if directive is not None:
            yield directive


def _make_directive(number: int, line: str) -> Directive | None:
    raw = line.strip()
    content = raw.split("#", 1)[0].strip()
    if not content:
        return None
    parts = content.split(None, 1)
    keyword = parts[0]
    rest = parts[1].strip() if len(parts) > 1 else ""
    return Directive(number, keyword, tuple(rest.split()), rest, raw)


# -----------------------------------------------------------------
# Числовые аргументы
# -----------------------------------------------------------------
# без `1_0`, `nan`, `inf`, которые принимают float() и int()
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INT_RE = re.compile(r"[+-]?[0-9]+")


def to_float(token: str) -> float:
    if not _FLOAT_RE.fullmatch(token):
        raise ValueError(f"not a number: {token!r}")
    return float(token)


def to_int(token: str) -> int:
    if not _INT_RE.fullmatch(token):
        raise ValueError(f"not an integer: {token!r}")
    return int(token)


def parse_floats(directive: Directive, counts: tuple[int, ...]) -> tuple[float, ...]:
    """Прочитать все аргументы как float; их число должно входить в `counts`."""
    if len(directive.args) not in counts:
        expected = " or ".join(str(c) for c in counts)
        raise MalformedDirective(
            directive.line, directive.raw,
            f"expected {expected} arguments, got {len(directive.args)}",
        )
    try:
        return tuple(to_float(a) for a in directive.args)
    except ValueError:
        raise MalformedDirective(directive.line, directive.raw, "non-numeric argument") from None


def parse_float(directive: Directive) -> float:
    return parse_floats(directive, (1,))[0]


def parse_int(directive: Directive, token: str) -> int:
    try:
        return to_int(token)
    except ValueError:
        raise MalformedDirective(directive.line, directive.raw, f"not an integer: {token!r}") from None


def require_rest(directive: Directive) -> str:
    """Директивы с именем (`usemtl`, `newmtl`, `o`) требуют хотя бы один аргумент."""
    if not directive.rest:
        raise MalformedDirective(directive.line, directive.raw, "missing name")
    return directive.rest
