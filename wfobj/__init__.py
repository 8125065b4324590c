"""
wfobj – потоковый лексер и парсер Wavefront OBJ.
Символы -> токены -> события геометрии (v, vt, vn, vp, f) в приёмник.
"""

from wfobj.utils import logger, Config
from wfobj.errors import (
    ObjParseError, LexicalError, ObjSyntaxError, TokenMismatchError,
    EmptyFaceError, MeshIndexError,
)
from wfobj.io import CharacterSource, StringReader, StreamReader, FileReader
from wfobj.lexer import Lexer, Token, TokenKind
from wfobj.parser import Parser, ParseStatistics, ObjSink, IndexTriple
from wfobj.mesh import MeshBuilder, ObjMesh
from wfobj.utils.loader import parse_string, parse_file, load_obj

__version__ = "1.0.0"

__all__ = [
    "Config",
    "ObjParseError",
    "LexicalError",
    "ObjSyntaxError",
    "TokenMismatchError",
    "EmptyFaceError",
    "MeshIndexError",
    "CharacterSource",
    "StringReader",
    "StreamReader",
    "FileReader",
    "Lexer",
    "Token",
    "TokenKind",
    "Parser",
    "ParseStatistics",
    "ObjSink",
    "IndexTriple",
    "MeshBuilder",
    "ObjMesh",
    "parse_string",
    "parse_file",
    "load_obj",
]
