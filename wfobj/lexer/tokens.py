"""
Токены лексера и таблица зарезервированных слов.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Optional, Union


class TokenKind(Enum):
    END_OF_INPUT = auto()
    VERTEX = auto()
    TEXTURE = auto()
    NORMAL = auto()
    PARAMETER = auto()
    FACE = auto()
    OBJECT = auto()
    GROUP = auto()
    MATERIAL = auto()
    USE_MATERIAL = auto()
    SMOOTHING = auto()
    END_STATEMENT = auto()
    IDENTIFIER = auto()
    INTEGER = auto()
    FLOAT = auto()
    SEPARATOR = auto()
    ERROR = auto()


LITERALS = frozenset({TokenKind.INTEGER, TokenKind.FLOAT})

# Операторы, которые распознаются только ради пропуска остатка строки.
DIRECTIVES = frozenset({
    TokenKind.OBJECT,
    TokenKind.GROUP,
    TokenKind.SMOOTHING,
    TokenKind.MATERIAL,
    TokenKind.USE_MATERIAL,
})

# Только чтение; регистр важен ("V" – обычный идентификатор).
RESERVED = MappingProxyType({
    "v": TokenKind.VERTEX,
    "vt": TokenKind.TEXTURE,
    "vn": TokenKind.NORMAL,
    "vp": TokenKind.PARAMETER,
    "f": TokenKind.FACE,
    "o": TokenKind.OBJECT,
    "g": TokenKind.GROUP,
    "mtllib": TokenKind.MATERIAL,
    "usemtl": TokenKind.USE_MATERIAL,
    "s": TokenKind.SMOOTHING,
})


@dataclass(frozen=True)
class Token:
    """
    Токен с одним допустимым видом полезной нагрузки:
    value – у INTEGER/FLOAT, lexicon – у ключевых слов и идентификаторов.
    """
    kind: TokenKind
    value: Optional[Union[int, float]] = None
    lexicon: str = ""

    @classmethod
    def integer(cls, value: int) -> "Token":
        return cls(TokenKind.INTEGER, int(value))

    @classmethod
    def real(cls, value: float) -> "Token":
        return cls(TokenKind.FLOAT, float(value))

    @classmethod
    def word(cls, lexicon: str) -> "Token":
        """Ключевое слово из RESERVED или IDENTIFIER."""
        return cls(RESERVED.get(lexicon, TokenKind.IDENTIFIER), lexicon=lexicon)

    @property
    def is_literal(self) -> bool:
        return self.kind in LITERALS

    def as_integer(self) -> int:
        if self.kind is not TokenKind.INTEGER:
            raise TypeError(f"{self.kind.name} token has no integer payload")
        return self.value

    def as_float(self) -> float:
        if self.kind not in LITERALS:
            raise TypeError(f"{self.kind.name} token has no numeric payload")
        return float(self.value)

    def __repr__(self):
        if self.is_literal:
            return f"Token({self.kind.name}, {self.value!r})"
        if self.lexicon:
            return f"Token({self.kind.name}, {self.lexicon!r})"
        return f"Token({self.kind.name})"


# Токены без нагрузки можно разделять между проходами.
END_OF_INPUT = Token(TokenKind.END_OF_INPUT)
END_STATEMENT = Token(TokenKind.END_STATEMENT)
SEPARATOR = Token(TokenKind.SEPARATOR)
