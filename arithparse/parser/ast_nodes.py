"""
Abstract Syntax Tree node definitions for arithparse.

The tree has exactly three node kinds: integer literals, prefix
expressions and infix expressions. Nodes are frozen once built and
support the visitor pattern.

Author: arithparse contributors
"""

from abc import ABC, abstractmethod
from typing import Any, List
from dataclasses import dataclass
from enum import Enum

from ..lexer.tokens import Token, SourceLocation


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""
    INTEGER_LITERAL = "IntegerLiteral"
    PREFIX_EXPRESSION = "PrefixExpression"
    INFIX_EXPRESSION = "InfixExpression"


class ASTVisitor(ABC):
    """Visitor interface with one method per node kind."""

    @abstractmethod
    def visit_integer_literal(self, node: 'IntegerLiteral') -> Any:
        pass

    @abstractmethod
    def visit_prefix_expression(self, node: 'PrefixExpression') -> Any:
        pass

    @abstractmethod
    def visit_infix_expression(self, node: 'InfixExpression') -> Any:
        pass


class ASTNode(ABC):
    """Base class for all AST nodes."""

    node_type: ASTNodeType

    # Token the node was built from
    token: Token

    @abstractmethod
    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        pass

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""
        pass

    @property
    def location(self) -> SourceLocation:
        return self.token.location

    def __str__(self) -> str:
        from .display import to_display_string
        return to_display_string(self)


class Expression(ASTNode):
    """Base class for expressions."""
    pass


@dataclass(frozen=True)
class IntegerLiteral(Expression):
    """Integer literal expression."""
    token: Token
    value: int

    node_type = ASTNodeType.INTEGER_LITERAL

    @property
    def text(self) -> str:
        return self.token.lexeme

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_integer_literal(self)

    def children(self) -> List[ASTNode]:
        return []


@dataclass(frozen=True)
class PrefixExpression(Expression):
    """Prefix (unary) operation expression."""
    token: Token
    operator: str
    operand: Expression

    node_type = ASTNodeType.PREFIX_EXPRESSION

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_prefix_expression(self)

    def children(self) -> List[ASTNode]:
        return [self.operand]


@dataclass(frozen=True)
class InfixExpression(Expression):
    """Infix (binary) operation expression."""
    token: Token
    left: Expression
    operator: str
    right: Expression

    node_type = ASTNodeType.INFIX_EXPRESSION

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_infix_expression(self)

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]
