# wavefront3d/parsing/errors.py
"""Исключения парсеров OBJ/MTL."""


class WavefrontError(Exception):
    """Базовое исключение для ошибок разбора OBJ/MTL."""


class MalformedDirective(WavefrontError):
    """Распознанная директива с неверным числом или типом аргументов."""

    def __init__(self, line: int, raw: str, reason: str = ""):
        self.line = line
        self.raw = raw
        self.reason = reason
        msg = f"line {line}: malformed directive {raw!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class DanglingIndexReference(WavefrontError):
    """Грань ссылается на индекс за пределами пула своего потока."""

    def __init__(self, line: int, index: int, stream: str):
        self.line = line
        self.index = index
        self.stream = stream
        super().__init__(f"line {line}: {stream} index {index} is out of range")
