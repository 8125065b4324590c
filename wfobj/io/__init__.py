from wfobj.io.reader import EOF, CharacterSource, StringReader, StreamReader, FileReader

__all__ = ["EOF", "CharacterSource", "StringReader", "StreamReader", "FileReader"]
