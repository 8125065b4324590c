"""
Рекурсивный спуск по операторам OBJ.

    vertex    := v  float float float [float]
    texture   := vt float float [float]
    normal    := vn float float float
    parameter := vp float [float [float]]
    face      := f  group+
    group     := int ['/' [int] ['/' [int]]]
    skip      := (o|g|s|mtllib|usemtl) <остаток строки>

Каждый распознанный оператор – ровно один вызов приёмника.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import List, Optional

from wfobj.errors import EmptyFaceError, TokenMismatchError
from wfobj.io.reader import CharacterSource
from wfobj.lexer.lexer import Lexer
from wfobj.lexer.tokens import DIRECTIVES, LITERALS, TokenKind
from wfobj.parser.sink import IndexTriple, ObjSink
from wfobj.utils.config import Config
from wfobj.utils.logger import logger


@dataclass
class ParseStatistics:
    """Счётчики прочитанных операторов; только растут."""
    vertices: int = 0
    textures: int = 0
    normals: int = 0
    parameters: int = 0
    faces: int = 0

    def as_dict(self) -> dict:
        return asdict(self)


class Parser:
    """Один экземпляр – один проход parse() по одному источнику."""

    def __init__(self, source: CharacterSource, sink: ObjSink, config: Optional[Config] = None):
        self.config = config if config is not None else Config()
        self.strict_faces = bool(self.config.section("parser")["strict_faces"])
        self.lexer = Lexer(source)
        self.sink = sink
        self.statistics = ParseStatistics()
        sink.attach(self)

    # ------------------------------------------------------------------
    def parse(self) -> bool:
        """Разобрать весь ввод; ошибки – исключения ObjParseError."""
        logger.debug("[Parser] Parsing started.")
        lexer = self.lexer
        while True:
            kind = lexer.next_token().kind
            if kind is TokenKind.END_OF_INPUT:
                break
            if kind is TokenKind.VERTEX:
                self._parse_vertex()
            elif kind is TokenKind.TEXTURE:
                self._parse_texture()
            elif kind is TokenKind.NORMAL:
                self._parse_normal()
            elif kind is TokenKind.PARAMETER:
                self._parse_parameter()
            elif kind is TokenKind.FACE:
                self._parse_face()
            elif kind in DIRECTIVES:
                lexer.skip_line()
            # END_STATEMENT, идентификаторы и прочее – просто дальше
        logger.debug(f"[Parser] Parsing finished: {self.statistics}")
        return True

    # ------------------------------------------------------------------
    # Поля
    # ------------------------------------------------------------------
    def _optional_float(self) -> Optional[float]:
        """Число (int или float) из следующего токена, если он литерал."""
        if self.lexer.peek_token().kind in LITERALS:
            return self.lexer.next_token().as_float()
        return None

    def _float(self) -> float:
        value = self._optional_float()
        if value is None:
            token = self.lexer.next_token()
            raise TokenMismatchError(TokenKind.FLOAT, token.kind, *self.lexer.position)
        return value

    def _optional_integer(self) -> Optional[int]:
        if self.lexer.peek_token().kind is TokenKind.INTEGER:
            return self.lexer.next_token().as_integer()
        return None

    # ------------------------------------------------------------------
    # Операторы
    # ------------------------------------------------------------------
    def _parse_vertex(self):
        x, y, z = self._float(), self._float(), self._float()
        w = self._optional_float()
        self.statistics.vertices += 1
        self.sink.on_vertex(x, y, z, 1.0 if w is None else w)

    def _parse_texture(self):
        u, v = self._float(), self._float()
        w = self._optional_float()
        self.statistics.textures += 1
        self.sink.on_texture(u, v, 1.0 if w is None else w)

    def _parse_normal(self):
        x, y, z = self._float(), self._float(), self._float()
        self.statistics.normals += 1
        self.sink.on_normal(x, y, z)

    def _parse_parameter(self):
        u = self._float()
        v = self._optional_float()
        # третье поле пробуем только если было второе
        w = self._optional_float() if v is not None else None
        self.statistics.parameters += 1
        self.sink.on_parameter(u, 0.0 if v is None else v, 0.0 if w is None else w)

    def _parse_face(self):
        line, column = self.lexer.position
        indices: List[IndexTriple] = []
        while True:
            triple = self._parse_face_group()
            if triple is None:
                break
            indices.append(triple)

        if not indices and self.strict_faces:
            raise EmptyFaceError(line, column)

        self.statistics.faces += 1
        self.sink.on_face(tuple(indices), len(indices))

    def _parse_face_group(self) -> Optional[IndexTriple]:
        """Группа v[/[vt][/[vn]]]; None, если ведущего индекса нет (конец грани)."""
        vertex = self._optional_integer()
        if vertex is None:
            return None
        texture = normal = 0
        if self.lexer.check(TokenKind.SEPARATOR):
            texture = self._optional_integer() or 0
            if self.lexer.check(TokenKind.SEPARATOR):
                normal = self._optional_integer() or 0
        return IndexTriple(vertex, texture, normal)
