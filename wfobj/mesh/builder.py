"""
Приёмник, собирающий события в numpy‑массивы.

Здесь же разрешаются индексы OBJ: 1‑based и отрицательные (относительно
числа уже прочитанных элементов). Парсер отдаёт их «как есть».
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

import numpy as np

from wfobj.errors import MeshIndexError
from wfobj.parser.sink import IndexTriple, ObjSink
from wfobj.utils.logger import logger

MISSING = -1


def resolve_index(index: int, count: int, kind: str, optional: bool = False) -> int:
    """
    OBJ‑индекс -> 0‑based.
        i > 0  -> i - 1
        i < 0  -> count + i   (-1 – последний прочитанный элемент)
        i == 0 -> MISSING для texture/normal, ошибка для вершины
    """
    if index == 0:
        if optional:
            return MISSING
        raise MeshIndexError(f"Zero {kind} index is not valid in OBJ")
    resolved = index - 1 if index > 0 else count + index
    if not 0 <= resolved < count:
        raise MeshIndexError(f"{kind} index {index} out of range (have {count})")
    return resolved


@dataclass
class ObjMesh:
    positions: np.ndarray
    texcoords: np.ndarray
    normals: np.ndarray
    parameters: np.ndarray
    faces: List[np.ndarray] = field(default_factory=list)

    def triangulate(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """
        Веер треугольников по каждой грани + склейка одинаковых троек
        (pos, tex, norm) в одну вершину.
        Возвращает (positions, normals, texcoords, indices).
        """
        vertex_data = []
        index_data = []
        vert_dict = {}   # (p, t, n) -> index
        for face in self.faces:
            if len(face) < 3:
                continue
            v0 = tuple(face[0])
            for i in range(1, len(face) - 1):
                for key in (v0, tuple(face[i]), tuple(face[i + 1])):
                    if key not in vert_dict:
                        p, t, n = key
                        normal = self.normals[n].tolist() if n != MISSING else [0.0, 0.0, 1.0]
                        tex = self.texcoords[t].tolist() if t != MISSING else [0.0, 0.0]
                        vertex_data.extend(self.positions[p].tolist() + normal + tex)
                        vert_dict[key] = len(vert_dict)
                    index_data.append(vert_dict[key])

        vertex_arr = np.array(vertex_data, dtype=np.float32).reshape(-1, 8)  # 3+3+2
        positions = vertex_arr[:, 0:3]
        normals = vertex_arr[:, 3:6]
        texcoords = vertex_arr[:, 6:8]
        indices = np.array(index_data, dtype=np.uint32)
        return positions, normals, texcoords, indices


class MeshBuilder(ObjSink):
    """Копит вершины/нормали/texcoords/грани, build() отдаёт ObjMesh."""

    def __init__(self):
        self.positions = []
        self.texcoords = []
        self.normals = []
        self.parameters = []
        self.faces = []

    def on_vertex(self, x, y, z, w):
        # w однородной координаты не храним
        self.positions.append((x, y, z))

    def on_texture(self, u, v, w):
        self.texcoords.append((u, v))

    def on_normal(self, x, y, z):
        self.normals.append((x, y, z))

    def on_parameter(self, u, v, w):
        self.parameters.append((u, v, w))

    def on_face(self, indices: Sequence[IndexTriple], count: int):
        # Счётчики парсера растут до вызова колбэка, поэтому совпадают
        # с длинами списков; без парсера берём длины.
        stats = self.parser.statistics if self.parser is not None else None
        n_vertices = stats.vertices if stats is not None else len(self.positions)
        n_textures = stats.textures if stats is not None else len(self.texcoords)
        n_normals = stats.normals if stats is not None else len(self.normals)

        face = np.empty((count, 3), dtype=np.int64)
        try:
            for row, (v, t, n) in enumerate(indices):
                face[row, 0] = resolve_index(v, n_vertices, "vertex")
                face[row, 1] = resolve_index(t, n_textures, "texture", optional=True)
                face[row, 2] = resolve_index(n, n_normals, "normal", optional=True)
        except MeshIndexError as exc:
            if self.parser is not None:
                exc.line, exc.column = self.parser.lexer.position
            raise
        self.faces.append(face)

    def build(self) -> ObjMesh:
        mesh = ObjMesh(
            positions=np.array(self.positions, dtype=np.float32).reshape(-1, 3),
            texcoords=np.array(self.texcoords, dtype=np.float32).reshape(-1, 2),
            normals=np.array(self.normals, dtype=np.float32).reshape(-1, 3),
            parameters=np.array(self.parameters, dtype=np.float32).reshape(-1, 3),
            faces=list(self.faces),
        )
        logger.debug(
            f"[MeshBuilder] {len(mesh.positions)} positions, {len(mesh.normals)} normals, "
            f"{len(mesh.texcoords)} texcoords, {len(mesh.faces)} faces"
        )
        return mesh
