# -*- coding: utf-8 -*-
"""
conftest.py – записывающий приёмник событий.
Проверяет, что Parser вызывает ожидаемые колбэки в порядке ввода.
"""

from typing import Any, Tuple
import pytest

from wfobj.io.reader import StringReader
from wfobj.lexer.lexer import Lexer
from wfobj.parser.parser import Parser
from wfobj.parser.sink import ObjSink


# ----------------------------------------------------------------------
# RecordingSink – реализует все колбэки ObjSink.
# ----------------------------------------------------------------------
class RecordingSink(ObjSink):
    """Каждый колбэк только записывает вызов в `self.calls`."""

    def __init__(self) -> None:
        # (method_name, args)
        self.calls: list[Tuple[str, Tuple[Any, ...]]] = []

    def _record(self, name: str, *a) -> None:
        self.calls.append((name, a))

    def on_vertex(self, x, y, z, w):
        self._record("on_vertex", x, y, z, w)

    def on_texture(self, u, v, w):
        self._record("on_texture", u, v, w)

    def on_normal(self, x, y, z):
        self._record("on_normal", x, y, z)

    def on_parameter(self, u, v, w):
        self._record("on_parameter", u, v, w)

    def on_face(self, indices, count):
        self._record("on_face", [tuple(t) for t in indices], count)

    def names(self):
        return [name for name, _ in self.calls]


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def run(sink):
    """run(text) -> parser после полного прохода."""
    def _run(text, config=None):
        parser = Parser(StringReader(text), sink, config)
        assert parser.parse() is True
        return parser
    return _run


def lex_all(text):
    """Все токены до END_OF_INPUT включительно."""
    lexer = Lexer(StringReader(text))
    tokens = []
    while True:
        token = lexer.next_token()
        tokens.append(token)
        if token.kind.name == "END_OF_INPUT":
            return tokens
