from wfobj.parser.sink import IndexTriple, ObjSink
from wfobj.parser.parser import Parser, ParseStatistics

__all__ = ["IndexTriple", "ObjSink", "Parser", "ParseStatistics"]
