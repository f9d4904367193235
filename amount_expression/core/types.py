"""
Tipos customizados e enumerações do avaliador.
"""

import operator
from enum import Enum
from typing import Annotated, Callable

from pydantic import Field


# ENUMERAÇÕES

class ErrorKind(str, Enum):
    """Motivos de rejeição de uma expressão de valor."""

    EMPTY_INPUT = "EmptyInput"
    INVALID_CHARACTER = "InvalidCharacter"
    INVALID_NUMBER_FORMAT = "InvalidNumberFormat"
    INVALID_EXPRESSION = "InvalidExpression"
    UNBALANCED_PARENTHESES = "UnbalancedParentheses"
    NON_POSITIVE_AMOUNT = "NonPositiveAmount"
    EXPRESSION_TOO_LONG = "ExpressionTooLong"

    @classmethod
    def structural(cls) -> list["ErrorKind"]:
        """Retorna os erros produzidos pelo avaliador de pilhas."""
        return [cls.INVALID_EXPRESSION, cls.UNBALANCED_PARENTHESES]


class TokenKind(str, Enum):
    """Categorias de token."""

    NUMBER = "number"
    OPERATOR = "operator"
    LPAREN = "("
    RPAREN = ")"


class Operator(str, Enum):
    """Operadores aritméticos binários suportados."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def precedence(self) -> int:
        """Precedência: * e / ligam mais forte que + e -."""
        if self in (Operator.MUL, Operator.DIV):
            return 2
        return 1

    @property
    def function(self) -> Callable[[float, float], float]:
        """Função que aplica o operador a (a, b)."""
        return _OPERATOR_FUNCTIONS[self]

    def apply(self, a: float, b: float) -> float:
        """Calcula `a op b`. Divisão por zero levanta ZeroDivisionError."""
        return self.function(a, b)

    @classmethod
    def symbols(cls) -> str:
        """Retorna os símbolos aceitos, na ordem da enumeração."""
        return "".join(op.value for op in cls)


_OPERATOR_FUNCTIONS: dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: operator.add,
    Operator.SUB: operator.sub,
    Operator.MUL: operator.mul,
    Operator.DIV: operator.truediv,
}


class KeyKind(str, Enum):
    """Tipos de tecla do teclado numérico."""

    DIGIT = "digit"
    OPERATOR = "operator"
    ACTION = "action"


# TIPOS ANOTADOS

# Valor monetário validado (sempre positivo)
Amount = Annotated[float, Field(gt=0)]
