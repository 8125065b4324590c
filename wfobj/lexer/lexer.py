"""
Лексер OBJ: поток символов -> поток токенов.

Два уровня заглядывания вперёд:
    * символы  – текущий и следующий (peek_char);
    * токены   – текущий и следующий (peek_token), следующий лексится лениво,
      только когда его запросили.

Ленивость нужна для skip_line(): после ключевого слова g/o/s/mtllib/usemtl
парсер просит пропустить строку, и её хвост не токенизируется вовсе.
"""

from __future__ import annotations

import math
import string
from typing import Optional, Tuple

from wfobj.errors import LexicalError, TokenMismatchError
from wfobj.io.reader import EOF, CharacterSource
from wfobj.lexer.tokens import END_OF_INPUT, END_STATEMENT, SEPARATOR, Token, TokenKind

_BLANK = frozenset(" \t\r")
_DIGITS = frozenset(string.digits)
_ALPHA = frozenset(string.ascii_letters)
_SIGNS = frozenset("+-")
_NUMERIC_START = _DIGITS | _SIGNS | {"."}

# Порядок величины, за которым float гарантированно inf / 0.0.
_MAX_DECIMAL_EXPONENT = 310
_MIN_DECIMAL_EXPONENT = -330
# Больше значащих цифр float не различает; остальные уходят в порядок.
_MAX_SIGNIFICANT_DIGITS = 40
_MAX_EXPONENT_DIGITS = 9
# int(str) ограничен по длине (sys.get_int_max_str_digits).
_INT_CHUNK = 4000


class Lexer:
    """LL(1) по токенам поверх LL(1) по символам."""

    def __init__(self, source: CharacterSource):
        self._source = source
        # Позиция последнего прочитанного символа; строки с 1.
        self.line = 1
        self.column = 0

        self._curr_char = EOF
        self._peek_char = source.next()

        self._curr_token: Optional[Token] = None
        self._peek_token: Optional[Token] = None
        self._curr_pos: Tuple[int, int] = (1, 0)
        self._peek_pos: Tuple[int, int] = (1, 0)

    # ------------------------------------------------------------------
    # Символы
    # ------------------------------------------------------------------
    def next_char(self) -> str:
        """Сдвинуться на один символ, обновив (line, column)."""
        self._curr_char = self._peek_char
        if self._curr_char == EOF:
            return EOF
        self._peek_char = self._source.next()
        if self._curr_char == "\n":
            self.line += 1
            self.column = 0
        else:
            self.column += 1
        return self._curr_char

    def _discard_line(self):
        """Съесть всё до перевода строки включительно (или до конца ввода)."""
        while True:
            ch = self.next_char()
            if ch == "\n" or ch == EOF:
                return

    # ------------------------------------------------------------------
    # Токены
    # ------------------------------------------------------------------
    @property
    def current_token(self) -> Optional[Token]:
        return self._curr_token

    @property
    def position(self) -> Tuple[int, int]:
        """(line, column) начала текущего токена."""
        return self._curr_pos

    def peek_token(self) -> Token:
        if self._peek_token is None:
            self._peek_token = self._lex()
        return self._peek_token

    def next_token(self) -> Token:
        self.peek_token()
        self._curr_token, self._curr_pos = self._peek_token, self._peek_pos
        self._peek_token = None
        return self._curr_token

    def check(self, kind: TokenKind) -> bool:
        """Съесть следующий токен, только если он нужного вида."""
        if self.peek_token().kind is kind:
            self.next_token()
            return True
        return False

    def expect(self, kind: TokenKind) -> Token:
        token = self.next_token()
        if token.kind is not kind:
            raise TokenMismatchError(kind, token.kind, *self._curr_pos)
        return token

    def skip_line(self):
        """
        Пропустить остаток текущей строки.
        Если следующий токен уже прочитан и это конец оператора/ввода,
        строка закончилась – пропускать нечего.
        """
        if self._peek_token is not None:
            if self._peek_token.kind in (TokenKind.END_STATEMENT, TokenKind.END_OF_INPUT):
                return
            self._peek_token = None
        self._discard_line()

    # ------------------------------------------------------------------
    # Лексический разбор
    # ------------------------------------------------------------------
    def _lex(self) -> Token:
        while True:
            line, column = self.line, self.column
            ch = self.next_char()
            if ch == "\n":
                # позиция самого перевода строки, до сдвига счётчиков
                self._peek_pos = (line, column + 1)
                return END_STATEMENT
            self._peek_pos = (self.line, self.column)
            if ch == EOF:
                return END_OF_INPUT
            if ch in _BLANK:
                continue
            if ch == "#":
                self._discard_line()
                return END_STATEMENT
            if ch == "/":
                return SEPARATOR
            if ch in _NUMERIC_START:
                return self._lex_number()
            if ch in _ALPHA:
                return self._lex_identifier()
            raise LexicalError(self.line, self.column, ch)

    def _read_digits(self) -> str:
        """Максимальная цепочка цифр, начиная с peek_char."""
        digits = []
        while self._peek_char in _DIGITS:
            digits.append(self.next_char())
        return "".join(digits)

    def _lex_number(self) -> Token:
        start = self._curr_char
        line, column = self.line, self.column
        negative = start == "-"

        if start in _DIGITS:
            int_digits = start + self._read_digits()
        elif start in _SIGNS:
            int_digits = self._read_digits()
        else:
            int_digits = ""

        is_float = False
        frac_digits = ""
        if start == ".":
            is_float = True
            frac_digits = self._read_digits()
        elif self._peek_char == ".":
            self.next_char()
            is_float = True
            frac_digits = self._read_digits()

        if not int_digits and not frac_digits:
            raise LexicalError(line, column, start)

        exponent = 0
        if self._peek_char in ("e", "E"):
            self.next_char()
            is_float = True
            exp_negative = False
            if self._peek_char in _SIGNS:
                exp_negative = self.next_char() == "-"
            exp_digits = self._read_digits().lstrip("0")
            if len(exp_digits) > _MAX_EXPONENT_DIGITS:
                # заведомо за пределами float; точное значение не нужно
                exp_digits = "9" * _MAX_EXPONENT_DIGITS
            if exp_digits:
                exponent = -int(exp_digits) if exp_negative else int(exp_digits)

        if not is_float:
            integer = _digits_to_int(int_digits)
            return Token.integer(-integer if negative else integer)

        # value = (integer + fraction / divisor) * 10**exponent, знак – один раз
        value = _decimal_to_float(int_digits + frac_digits, exponent - len(frac_digits))
        return Token.real(-value if negative else value)

    def _lex_identifier(self) -> Token:
        chars = [self._curr_char]
        while self._peek_char in _ALPHA:
            chars.append(self.next_char())
        return Token.word("".join(chars))


def _digits_to_int(digits: str) -> int:
    """int() по кускам: строка цифр может быть длиннее лимита int(str)."""
    value = 0
    for pos in range(0, len(digits), _INT_CHUNK):
        chunk = digits[pos:pos + _INT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def _decimal_to_float(digits: str, exp10: int) -> float:
    """int(digits) * 10**exp10 -> ближайший float."""
    digits = digits.lstrip("0")
    if not digits:
        return 0.0
    if len(digits) > _MAX_SIGNIFICANT_DIGITS:
        exp10 += len(digits) - _MAX_SIGNIFICANT_DIGITS
        digits = digits[:_MAX_SIGNIFICANT_DIGITS]
    magnitude = len(digits) + exp10
    if magnitude > _MAX_DECIMAL_EXPONENT:
        return math.inf
    if magnitude < _MIN_DECIMAL_EXPONENT:
        return 0.0
    mantissa = int(digits)
    try:
        if exp10 >= 0:
            return float(mantissa * 10 ** exp10)
        return mantissa / 10 ** -exp10
    except OverflowError:
        return math.inf
