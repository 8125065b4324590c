# -*- coding: utf-8 -*-
"""
Готовые точки входа: разобрать строку / файл в заданный приёмник
или сразу получить numpy‑массивы для отрисовки.
"""

from wfobj.errors import ObjParseError
from wfobj.io.reader import FileReader, StringReader
from wfobj.mesh.builder import MeshBuilder
from wfobj.parser.parser import Parser
from wfobj.utils.config import Config
from wfobj.utils.logger import logger
from wfobj.utils.profiler import Profiler


def parse_string(text, sink, config=None):
    """Разобрать OBJ из строки, вернуть ParseStatistics."""
    parser = Parser(StringReader(text), sink, config)
    parser.parse()
    return parser.statistics


def parse_file(path, sink, config=None):
    """Разобрать OBJ‑файл, вернуть ParseStatistics. Ошибка логируется и пробрасывается."""
    config = config if config is not None else Config()
    reader_cfg = config.section("reader")
    with FileReader(path, encoding=reader_cfg["encoding"], chunk_size=reader_cfg["chunk_size"]) as reader:
        try:
            # конструктор уже читает первый кусок файла
            with Profiler(f"parse {reader.path.name}") as profiler:
                parser = Parser(reader, sink, config)
                parser.parse()
        except ObjParseError as exc:
            logger.error(f"[Loader] {reader.path}:{exc.line}:{exc.column}: {exc}")
            raise
        except UnicodeDecodeError as exc:
            logger.error(f"[Loader] {reader.path}: not valid {reader_cfg['encoding']}: {exc}")
            raise
    logger.debug(
        f"[Loader] Parsed {reader.path} in {profiler.elapsed:.2f} ms: {parser.statistics.as_dict()}"
    )
    return parser.statistics


def load_obj(path, config=None):
    """
    Полный путь «файл -> буферы»:
    (positions, normals, texcoords, indices), индексы – треугольники.
    """
    builder = MeshBuilder()
    parse_file(path, builder, config)
    return builder.build().triangulate()
