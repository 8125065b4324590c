"""
Источники символов для лексера.

Контракт минимален: next() возвращает один символ или EOF (пустую строку).
После конца ввода каждый следующий вызов снова возвращает EOF.
Никакого заглядывания вперёд от источника не требуется – лексер
держит свой буфер из двух символов сам.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, TextIO

from wfobj.utils.logger import logger

EOF = ""


class CharacterSource(ABC):
    """Базовый интерфейс источника символов."""

    @abstractmethod
    def next(self) -> str:
        pass


class StringReader(CharacterSource):
    """Символы из строки в памяти."""

    def __init__(self, text: str):
        self._text = text
        self._pos = 0

    def next(self) -> str:
        if self._pos >= len(self._text):
            return EOF
        ch = self._text[self._pos]
        self._pos += 1
        return ch


class StreamReader(CharacterSource):
    """
    Символы из текстового потока (любой объект с read(n)).
    Поток читается кусками по chunk_size символов.
    """

    def __init__(self, stream: TextIO, chunk_size: int = 65536):
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._stream = stream
        self._chunk_size = chunk_size
        self._chunk = ""
        self._pos = 0
        self._exhausted = False

    def next(self) -> str:
        if self._pos >= len(self._chunk):
            if self._exhausted:
                return EOF
            self._chunk = self._stream.read(self._chunk_size)
            self._pos = 0
            if not self._chunk:
                self._exhausted = True
                return EOF
        ch = self._chunk[self._pos]
        self._pos += 1
        return ch


class FileReader(StreamReader):
    """Открывает файл в текстовом режиме; закрывается через close() или with."""

    def __init__(self, path, encoding: str = "utf-8", chunk_size: int = 65536):
        self.path = Path(path).expanduser()
        if not self.path.is_file():
            raise FileNotFoundError(f"OBJ file not found: {self.path}")
        self._file: Optional[TextIO] = self.path.open("r", encoding=encoding, newline="")
        super().__init__(self._file, chunk_size=chunk_size)
        logger.debug(f"[Reader] Opened {self.path} ({encoding})")

    def close(self):
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
