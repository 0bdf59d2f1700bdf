"""
Lexical analyzer for the Monkey programming language.

This module converts raw source text into a stream of classified tokens:

Classes:
    CharacterStream: Stream abstraction for reading characters with line/column tracking.
    Lexer: Converts a CharacterStream into a sequence of tokens, one per `next_token()` call.

Features:
    - Skips whitespace (space, tab, carriage return, newline)
    - Longest-match recognition of operators and punctuation (`==` and `!=` win over `=` and `!`)
    - Recognizes:
        * Identifiers and keywords (ASCII letters and `_`, digits never continue a word)
        * Integer literals (runs of ASCII digits, not range-checked)
        * Operators and punctuation
    - Unrecognized characters become ILLEGAL tokens; the lexer never raises.
    - END_OF_INPUT is returned forever once the source is exhausted.

Example:
    >>> lexer = Lexer("let five = 5;")
    >>> lexer.next_token()
    Token(LetKeyword, 'let')

Exports:
    - CharacterStream
    - Lexer
    - Token
    - TokenType
    - tokenize
"""

from collections.abc import Callable, Iterator

from monkey.monkey_token import (
    MAX_SYMBOL_LENGTH,
    Token,
    TokenType,
    lookup_identifier,
    symbol_hashmap,
)

WHITESPACE = " \t\r\n"


def is_letter(ch: str) -> bool:
    return ch == "_" or (ch.isascii() and ch.isalpha())


def is_digit(ch: str) -> bool:
    return len(ch) == 1 and "0" <= ch <= "9"


class CharacterStream:
    """
    Reads a source string one character at a time, tracking the line and column
    of the next unread character. Reads past the end yield "" and leave the
    position unchanged.

    Attributes:
        source (str): The input source string.
        position (int): Current index in the source.
        line (int): Current line number (1-indexed).
        column (int): Current column number (1-indexed).
    """

    def __init__(self, source: str, position: int = 0, line: int = 1, column: int = 1):
        self.source = source
        self.position = position
        self.line = line
        self.column = column

    def next(self) -> str:
        """Consumes one character and returns it; returns "" without moving once exhausted."""
        char = self.peek()
        if char == "\n":
            self.line += 1
            self.column = 1
        elif char:
            self.column += 1
        self.position += len(char)
        return char

    def peek(self, offset: int = 0) -> str:
        """
        Returns the character at the given offset from the current position without advancing.

        Returns:
            str: The character at the offset, or an empty string if out of bounds.
        """
        index = self.position + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def end_of_file(self) -> bool:
        return self.position >= len(self.source)


class Lexer:
    """Lexical analyzer for the Monkey language.

    The Lexer owns a CharacterStream and hands out one Token per `next_token()` call.
    Its position only ever moves forward; after the source is exhausted every call
    returns an END_OF_INPUT token at the same position.

    Attributes:
        stream (CharacterStream): The source stream to tokenize.
    """

    def __init__(self, source: "str | CharacterStream") -> None:
        if isinstance(source, str):
            source = CharacterStream(source)
        self.stream = source

    def __iter__(self) -> Iterator[Token]:
        """Yields tokens up to, but not including, END_OF_INPUT."""
        while True:
            tok = self.next_token()
            if tok.type is TokenType.END_OF_INPUT:
                return
            yield tok

    def peek(self) -> str:
        return self.stream.peek()

    def advance(self) -> str:
        return self.stream.next()

    def skip_whitespace(self) -> None:
        while not self.stream.end_of_file() and self.peek() in WHITESPACE:
            self.advance()

    def read_while(self, predicate: Callable[[str], bool]) -> str:
        """Consumes characters while `predicate(ch)` holds and returns them."""
        text = ""
        while not self.stream.end_of_file() and predicate(self.peek()):
            text += self.advance()
        return text

    def match_operator(self) -> Token | None:
        """Attempts to match the longest operator or delimiter at the current position.

        Returns:
            Token | None: A Token if a match is found, otherwise None.
        """
        line, col = self.stream.line, self.stream.column
        max_symbol = None
        candidate = ""

        for i in range(MAX_SYMBOL_LENGTH):
            ch = self.stream.peek(i)
            if ch == "":
                break
            candidate += ch
            if candidate in symbol_hashmap:
                max_symbol = candidate

        if max_symbol:
            for _ in range(len(max_symbol)):
                self.advance()
            return Token(symbol_hashmap[max_symbol], max_symbol, line, col)

        return None

    def next_token(self) -> Token:
        """Consumes and returns the next Token from the stream.

        Returns:
            Token: The next token; END_OF_INPUT (literal "") once the source is exhausted.
        """
        self.skip_whitespace()

        line, col = self.stream.line, self.stream.column
        if self.stream.end_of_file():
            return Token(TokenType.END_OF_INPUT, "", line, col)

        ch = self.peek()

        # 1. Identifier or keyword
        if is_letter(ch):
            ident = self.read_while(is_letter)
            return Token(lookup_identifier(ident), ident, line, col)

        # 2. Integer literal
        if is_digit(ch):
            return Token(TokenType.INTEGER_LITERAL, self.read_while(is_digit), line, col)

        # 3. Operator or delimiter
        token = self.match_operator()
        if token:
            return token

        # 4. Unknown character
        return Token(TokenType.ILLEGAL, self.advance(), line, col)


def tokenize(source: str) -> list[Token]:
    """Lexes the whole source, returning every token including the final END_OF_INPUT."""
    lexer = Lexer(source)
    tokens = list(lexer)
    tokens.append(lexer.next_token())
    return tokens


__all__ = ["CharacterStream", "Lexer", "Token", "TokenType", "tokenize"]
