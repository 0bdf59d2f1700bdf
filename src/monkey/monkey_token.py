"""
Token model for the Monkey programming language.

Classes:
    TokenType: Closed enumeration of every token category the lexer can produce.
    Token: Immutable (type, literal) pair with the source position of its first character.

Tables:
    keyword_hashmap: Reserved words and the keyword category each one maps to.
    symbol_hashmap: Operator and punctuation spellings, including the two-character
        comparison operators `==` and `!=`.

A token's category and literal always agree: a `LET_KEYWORD` token has the literal
`"let"`, an `EQUAL` token has the literal `"=="`, and `END_OF_INPUT` has the empty
literal.

Exports:
    - TokenType
    - Token
    - keyword_hashmap
    - symbol_hashmap
    - lookup_identifier
"""

from dataclasses import dataclass
from enum import Enum


class TokenType(str, Enum):
    """Token categories. `str()` gives the name used in parser diagnostics."""

    ILLEGAL = "Illegal"
    END_OF_INPUT = "EndOfInput"

    # Identifiers and literals
    IDENTIFIER = "Identifier"
    INTEGER_LITERAL = "IntegerLiteral"

    # Operators
    ASSIGN = "Assign"
    PLUS = "Plus"
    MINUS = "Minus"
    BANG = "Bang"
    ASTERISK = "Asterisk"
    SLASH = "Slash"
    LESS_THAN = "LessThan"
    GREATER_THAN = "GreaterThan"
    EQUAL = "Equal"
    NOT_EQUAL = "NotEqual"

    # Delimiters
    COMMA = "Comma"
    SEMICOLON = "Semicolon"
    LEFT_PAREN = "LeftParen"
    RIGHT_PAREN = "RightParen"
    LEFT_BRACE = "LeftBrace"
    RIGHT_BRACE = "RightBrace"

    # Keywords
    FUNCTION_KEYWORD = "FunctionKeyword"
    LET_KEYWORD = "LetKeyword"
    TRUE_KEYWORD = "TrueKeyword"
    FALSE_KEYWORD = "FalseKeyword"
    IF_KEYWORD = "IfKeyword"
    ELSE_KEYWORD = "ElseKeyword"
    RETURN_KEYWORD = "ReturnKeyword"

    def __str__(self) -> str:
        return self.value


keyword_hashmap: dict[str, TokenType] = {
    "fn": TokenType.FUNCTION_KEYWORD,
    "let": TokenType.LET_KEYWORD,
    "true": TokenType.TRUE_KEYWORD,
    "false": TokenType.FALSE_KEYWORD,
    "if": TokenType.IF_KEYWORD,
    "else": TokenType.ELSE_KEYWORD,
    "return": TokenType.RETURN_KEYWORD,
}

symbol_hashmap: dict[str, TokenType] = {
    "=": TokenType.ASSIGN,
    "==": TokenType.EQUAL,
    "!": TokenType.BANG,
    "!=": TokenType.NOT_EQUAL,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "<": TokenType.LESS_THAN,
    ">": TokenType.GREATER_THAN,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
}

# Longest spelling in symbol_hashmap; bounds the lexer's operator lookahead.
MAX_SYMBOL_LENGTH = max(len(symbol) for symbol in symbol_hashmap)


def lookup_identifier(ident: str) -> TokenType:
    """Resolve a scanned word to its keyword category, or IDENTIFIER if it is not reserved."""
    return keyword_hashmap.get(ident, TokenType.IDENTIFIER)


@dataclass(frozen=True)
class Token:
    """A single lexical token.

    Attributes:
        type (TokenType): The token category.
        literal (str): The exact source text of the token ("" for END_OF_INPUT).
        line (int): The 1-based line number where the token starts.
        col (int): The 1-based column number where the token starts.
    """

    type: TokenType
    literal: str
    line: int = 0
    col: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.literal!r})"


__all__ = [
    "MAX_SYMBOL_LENGTH",
    "Token",
    "TokenType",
    "keyword_hashmap",
    "lookup_identifier",
    "symbol_hashmap",
]
