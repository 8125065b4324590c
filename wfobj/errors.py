"""
Исключения разбора OBJ.

Все ошибки фатальны для текущего прохода parse(), но не для процесса:
вызывающий код ловит ObjParseError и продолжает со следующим файлом.
"""

from __future__ import annotations


class ObjParseError(Exception):
    """Базовая ошибка разбора; хранит позицию (line, column)."""

    def __init__(self, message: str, line: int = 0, column: int = 0):
        super().__init__(message)
        self.line = line
        self.column = column


class LexicalError(ObjParseError):
    """Лексема начинается с недопустимого символа."""

    def __init__(self, line: int, column: int, char: str):
        super().__init__(
            f"Unexpected character at ({line}:{column}) {char!r}", line, column
        )
        self.char = char


class ObjSyntaxError(ObjParseError):
    """Ошибка уровня оператора (statement)."""


class TokenMismatchError(ObjSyntaxError):
    """Парсер ждал токен одного вида, а получил другой."""

    def __init__(self, expected, actual, line: int = 0, column: int = 0):
        super().__init__(
            f"Expected token {expected.name}, received {actual.name} at ({line}:{column})",
            line,
            column,
        )
        self.expected = expected
        self.actual = actual


class EmptyFaceError(ObjSyntaxError):
    """Оператор f без единой группы индексов."""

    def __init__(self, line: int = 0, column: int = 0):
        super().__init__(
            f"Face statement without vertex indices at ({line}:{column})", line, column
        )


class MeshIndexError(ObjParseError):
    """Индекс грани нулевой или выходит за пределы уже прочитанных данных."""
