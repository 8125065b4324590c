from wfobj.lexer.tokens import Token, TokenKind, RESERVED, DIRECTIVES
from wfobj.lexer.lexer import Lexer

__all__ = ["Token", "TokenKind", "RESERVED", "DIRECTIVES", "Lexer"]
