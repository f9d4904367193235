"""
Módulo core: modelos de dados, exceções, tipos e constantes.
"""

from amount_expression.core.models import (
    Token,
    AmountResult,
    KeypadKey,
)
from amount_expression.core.exceptions import (
    AmountExpressionError,
    EmptyInputError,
    ExpressionTooLongError,
    InvalidCharacterError,
    InvalidNumberFormatError,
    InvalidExpressionError,
    UnbalancedParenthesesError,
    NonPositiveAmountError,
)
from amount_expression.core.types import (
    ErrorKind,
    TokenKind,
    Operator,
    KeyKind,
)
from amount_expression.core.constants import (
    ERROR_MESSAGES,
    KEYPAD_LAYOUT,
)

__all__ = [
    # Models
    "Token",
    "AmountResult",
    "KeypadKey",
    # Exceptions
    "AmountExpressionError",
    "EmptyInputError",
    "ExpressionTooLongError",
    "InvalidCharacterError",
    "InvalidNumberFormatError",
    "InvalidExpressionError",
    "UnbalancedParenthesesError",
    "NonPositiveAmountError",
    # Types
    "ErrorKind",
    "TokenKind",
    "Operator",
    "KeyKind",
    # Constants
    "ERROR_MESSAGES",
    "KEYPAD_LAYOUT",
]
