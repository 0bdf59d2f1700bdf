"""
Defines the abstract syntax tree (AST) node structure for the Monkey programming language.

Classes:
    Node:
        Base of every AST node. Reports the literal of the token that introduces it
        through `token_literal()`, renders back to source text through `str()` and
        serializes through `to_dict()`.

    Statement / Expression:
        The two disjoint syntactic roles a node may occupy. A node is never both.

    Program:
        The root of every parse; an ordered list of statements.

    LetStatement, ReturnStatement:
        The statement variants currently produced by the parser.

    Identifier:
        Leaf expression node holding the name it was spelled with.

    ASTDict:
        TypedDict shape of a serialized node, suitable for JSON output or debugging.

The node classes are dataclasses, so consumers pattern-match on them directly:

    match stmt:
        case LetStatement(name=Identifier(value=name)):
            ...
        case ReturnStatement():
            ...

Nodes are built during a single parse pass and owned by their parent; only
`LetStatement.name` / `LetStatement.value` are filled in after construction while
that statement is being parsed.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, TypedDict

from monkey.monkey_token import Token


class ASTDict(TypedDict, total=False):
    """
    TypedDict representation of a serialized AST node.

    Fields:
        kind (str): The node class name (e.g. "LetStatement", "Identifier").
        token (str): Literal of the token that introduces the node.
        line (int): Line number of that token.
        col (int): Column number of that token.
        value (Any): Identifier name, or the bound expression of a let statement.
        name (ASTDict | None): The bound name of a let statement.
        return_value (ASTDict | None): The expression of a return statement.
        statements (list[ASTDict]): Top-level statements of a program.
    """

    kind: str
    token: str
    line: int
    col: int
    value: Any
    name: "ASTDict | None"
    return_value: "ASTDict | None"
    statements: list["ASTDict"]


class Node(ABC):
    @abstractmethod
    def token_literal(self) -> str:
        """Literal of the token that introduces this node."""

    @abstractmethod
    def to_dict(self) -> ASTDict: ...


class Statement(Node):
    pass


class Expression(Node):
    pass


def _dump(node: Node | None) -> ASTDict | None:
    return node.to_dict() if node is not None else None


def _header(node: Node, token: Token) -> ASTDict:
    return {
        "kind": type(node).__name__,
        "token": token.literal,
        "line": token.line,
        "col": token.col,
    }


@dataclass
class Identifier(Expression):
    token: Token
    value: str

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return self.value

    def to_dict(self) -> ASTDict:
        d = _header(self, self.token)
        d["value"] = self.value
        return d


@dataclass
class LetStatement(Statement):
    token: Token
    name: Identifier | None = None
    value: Expression | None = None

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        name = str(self.name) if self.name is not None else ""
        value = str(self.value) if self.value is not None else ""
        return f"{self.token_literal()} {name} = {value};"

    def to_dict(self) -> ASTDict:
        d = _header(self, self.token)
        d["name"] = _dump(self.name)
        d["value"] = _dump(self.value)
        return d


@dataclass
class ReturnStatement(Statement):
    token: Token
    return_value: Expression | None = None

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        value = str(self.return_value) if self.return_value is not None else ""
        return f"{self.token_literal()} {value};"

    def to_dict(self) -> ASTDict:
        d = _header(self, self.token)
        d["return_value"] = _dump(self.return_value)
        return d


@dataclass
class Program(Node):
    statements: list[Statement] = field(default_factory=list)

    def token_literal(self) -> str:
        if not self.statements:
            return ""
        return self.statements[0].token_literal()

    def __str__(self) -> str:
        return "".join(str(stmt) for stmt in self.statements)

    def to_dict(self) -> ASTDict:
        return {
            "kind": "Program",
            "statements": [stmt.to_dict() for stmt in self.statements],
        }


__all__ = [
    "ASTDict",
    "Expression",
    "Identifier",
    "LetStatement",
    "Node",
    "Program",
    "ReturnStatement",
    "Statement",
]
