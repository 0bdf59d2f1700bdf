"""
Monkey Language Parser

Builds a `Program` syntax tree from the token stream of a `Lexer`.

The parser is a predictive recursive-descent parser with exactly one token of
lookahead. It pulls tokens lazily from the lexer into two slots, `cur_token` and
`peek_token`, and moves both forward together with `next_token()`:

    cur_token <- peek_token
    peek_token <- lexer.next_token()

There is no backtracking and no token pushback.

Supported Constructs
--------------------
- `let <identifier> = <expression>;`
- `return <expression>;`
- Empty statements (a lone `;`)

Expressions are not parsed yet: the tokens between `=` (or `return`) and the
terminating `;` are skipped, and `LetStatement.value` / `ReturnStatement.return_value`
stay `None`.

Error Handling
--------------
Parsing never raises. Every problem is recorded as a diagnostic string in
`errors()` and parsing continues:

- A required token is missing (`expect_peek`):
  "expected next token to be Identifier, got Assign instead"
- A statement runs into the end of input before its `;`:
  "expected next token to be Semicolon, got EndOfInput instead"
- A statement starts with a token no rule handles:
  "no statement starts with Plus '+'"
- The lexer produced an ILLEGAL token:
  "illegal token '@' at line 1, col 5"

After a failed statement the parser discards tokens up to the next `;`, or up to a
following `let`/`return`, so that one malformed statement produces one diagnostic
without swallowing the statement after it. Callers must check `errors()` to know
whether the returned tree is complete.
"""

from __future__ import annotations

from monkey.monkey_ast import Identifier, LetStatement, Program, ReturnStatement, Statement
from monkey.monkey_lexer import Lexer
from monkey.monkey_token import Token, TokenType

# Recovery stops in front of these so the next statement parses from its first token.
STATEMENT_STARTS = frozenset({TokenType.LET_KEYWORD, TokenType.RETURN_KEYWORD})


class Parser:
    """
    Monkey Parser Class

    Attributes
    ----------
    lexer : Lexer
        The token source; owned exclusively by this parser.
    cur_token : Token
        The token currently being examined.
    peek_token : Token
        The single token of lookahead.

    Methods
    -------
    parse_program() -> Program
        Consume the remaining token stream and return the program tree.
    errors() -> list[str]
        Diagnostics recorded so far, in order.
    expect_peek(token_type) -> bool
        Advance if the lookahead has the expected type, otherwise record a diagnostic.
    """

    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer
        self._errors: list[str] = []
        self.cur_token: Token = Token(TokenType.END_OF_INPUT, "")
        self.peek_token: Token = Token(TokenType.END_OF_INPUT, "")

        # Fill both lookahead slots
        self.next_token()
        self.next_token()

    def next_token(self) -> None:
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()
        if self.peek_token.type is TokenType.ILLEGAL:
            self._errors.append(
                f"illegal token {self.peek_token.literal!r} at line {self.peek_token.line}, col {self.peek_token.col}"
            )

    def errors(self) -> list[str]:
        return list(self._errors)

    def cur_token_is(self, token_type: TokenType) -> bool:
        return self.cur_token.type is token_type

    def peek_token_is(self, token_type: TokenType) -> bool:
        return self.peek_token.type is token_type

    def peek_error(self, token_type: TokenType) -> None:
        self._errors.append(
            f"expected next token to be {token_type}, got {self.peek_token.type} instead"
        )

    def expect_peek(self, token_type: TokenType) -> bool:
        """Shift if the lookahead is `token_type`; otherwise record a diagnostic and stay put."""
        if self.peek_token_is(token_type):
            self.next_token()
            return True
        self.peek_error(token_type)
        return False

    def parse_program(self) -> Program:
        """Parse every remaining statement. Always returns a Program, possibly empty."""
        program = Program()
        while not self.cur_token_is(TokenType.END_OF_INPUT):
            stmt = self.parse_statement()
            if stmt is not None:
                program.statements.append(stmt)
            elif not self.cur_token_is(TokenType.SEMICOLON):
                self.synchronize()
            self.next_token()
        return program

    def synchronize(self) -> None:
        """Discard tokens until the current one is `;` or END_OF_INPUT, or a `let`/`return` is next."""
        while not (
            self.cur_token_is(TokenType.SEMICOLON)
            or self.cur_token_is(TokenType.END_OF_INPUT)
            or self.peek_token.type in STATEMENT_STARTS
        ):
            self.next_token()

    def parse_statement(self) -> Statement | None:
        match self.cur_token.type:
            case TokenType.LET_KEYWORD:
                return self.parse_let_statement()
            case TokenType.RETURN_KEYWORD:
                return self.parse_return_statement()
            case TokenType.SEMICOLON | TokenType.ILLEGAL:
                return None
            case _:
                self._errors.append(
                    f"no statement starts with {self.cur_token.type} {self.cur_token.literal!r}"
                )
                return None

    def parse_let_statement(self) -> LetStatement | None:
        stmt = LetStatement(self.cur_token)

        if not self.expect_peek(TokenType.IDENTIFIER):
            return None
        stmt.name = Identifier(self.cur_token, self.cur_token.literal)

        if not self.expect_peek(TokenType.ASSIGN):
            return None

        # TODO: parse the bound expression once expression parsing lands
        if not self.skip_to_semicolon():
            return None
        return stmt

    def parse_return_statement(self) -> ReturnStatement | None:
        stmt = ReturnStatement(self.cur_token)

        if not self.skip_to_semicolon():
            return None
        return stmt

    def skip_to_semicolon(self) -> bool:
        """Shift past the current token and on to the next `;`.

        Returns False, with a diagnostic, if END_OF_INPUT comes first.
        """
        self.next_token()
        while not self.cur_token_is(TokenType.SEMICOLON):
            if self.cur_token_is(TokenType.END_OF_INPUT):
                self._errors.append(
                    f"expected next token to be {TokenType.SEMICOLON}, got {TokenType.END_OF_INPUT} instead"
                )
                return False
            self.next_token()
        return True


def parse(source: str) -> tuple[Program, list[str]]:
    """Parse source text, returning the program and its diagnostics."""
    parser = Parser(Lexer(source))
    program = parser.parse_program()
    return program, parser.errors()


__all__ = ["Parser", "parse"]
