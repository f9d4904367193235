"""
Hierarquia de exceções do avaliador.
Todas as exceções herdam de AmountExpressionError para facilitar tratamento.
Cada subclasse está associada a um ErrorKind e a uma mensagem padrão.
"""

from typing import Any, ClassVar, Optional

from amount_expression.core.constants import ERROR_MESSAGES
from amount_expression.core.types import ErrorKind


class AmountExpressionError(Exception):
    """
    Exceção base do sistema.
    Todas as exceções customizadas herdam desta classe.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_EXPRESSION

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        expression: Optional[str] = None,
        position: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        message = message or ERROR_MESSAGES[self.kind]
        super().__init__(message)
        self.message = message
        self.details = details or {}
        if expression is not None:
            # Limita tamanho para não poluir logs
            self.details["expression"] = expression[:200]
        if position is not None:
            self.details["position"] = position
        self.cause = cause

    def __str__(self) -> str:
        base = self.message
        if self.details:
            base += f" | Details: {self.details}"
        if self.cause:
            base += f" | Caused by: {self.cause}"
        return base

    def to_dict(self) -> dict[str, Any]:
        """Serializa exceção para dicionário."""
        return {
            "error_type": self.__class__.__name__,
            "kind": self.kind.value,
            "message": self.message,
            "details": self.details,
            "cause": str(self.cause) if self.cause else None,
        }


# EXCEÇÕES DE ENTRADA

class EmptyInputError(AmountExpressionError):
    """Campo vazio após a normalização."""

    kind = ErrorKind.EMPTY_INPUT


class ExpressionTooLongError(AmountExpressionError):
    """Expressão normalizada maior que o limite configurado."""

    kind = ErrorKind.EXPRESSION_TOO_LONG

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        length: Optional[int] = None,
        limit: Optional[int] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if length is not None:
            details["length"] = length
        if limit is not None:
            details["limit"] = limit
        super().__init__(message, details=details, **kwargs)
        self.length = length
        self.limit = limit


# EXCEÇÕES DE TOKENIZAÇÃO

class InvalidCharacterError(AmountExpressionError):
    """Caractere fora de dígitos, separadores, operadores e parênteses."""

    kind = ErrorKind.INVALID_CHARACTER

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        character: Optional[str] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if character is not None:
            details["character"] = character
        super().__init__(message, details=details, **kwargs)
        self.character = character


class InvalidNumberFormatError(AmountExpressionError):
    """Literal numérico malformado (dois pontos, ponto solto, overflow)."""

    kind = ErrorKind.INVALID_NUMBER_FORMAT

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        literal: Optional[str] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if literal is not None:
            details["literal"] = literal[:50]
        super().__init__(message, details=details, **kwargs)
        self.literal = literal


# EXCEÇÕES DE AVALIAÇÃO

class InvalidExpressionError(AmountExpressionError):
    """Arranjo inválido de operadores e operandos, ou resultado não finito."""

    kind = ErrorKind.INVALID_EXPRESSION


class UnbalancedParenthesesError(AmountExpressionError):
    """Parênteses sem par."""

    kind = ErrorKind.UNBALANCED_PARENTHESES


# EXCEÇÕES DE VALIDAÇÃO

class NonPositiveAmountError(AmountExpressionError):
    """Expressão válida cujo valor é menor ou igual a zero."""

    kind = ErrorKind.NON_POSITIVE_AMOUNT

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        value: Optional[float] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if value is not None:
            details["value"] = value
        super().__init__(message, details=details, **kwargs)
        self.value = value

