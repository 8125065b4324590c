"""
Приёмник событий геометрии.
"""

from __future__ import annotations

from typing import NamedTuple, Sequence


class IndexTriple(NamedTuple):
    """Индексы одного угла грани; 0 – «не задан» (для texture/normal)."""
    vertex: int
    texture: int = 0
    normal: int = 0


class ObjSink:
    """
    Базовый приёмник: все колбэки ничего не делают.
    Наследники переопределяют только нужные.

    Аргументы передаются по значению (float, кортеж IndexTriple),
    поэтому их можно сохранять без копирования.
    """

    parser = None

    def attach(self, parser) -> None:
        """Вызывается парсером при создании; даёт доступ к parser.statistics."""
        self.parser = parser

    def on_vertex(self, x: float, y: float, z: float, w: float) -> None:
        pass

    def on_texture(self, u: float, v: float, w: float) -> None:
        pass

    def on_normal(self, x: float, y: float, z: float) -> None:
        pass

    def on_parameter(self, u: float, v: float, w: float) -> None:
        pass

    def on_face(self, indices: Sequence[IndexTriple], count: int) -> None:
        pass
