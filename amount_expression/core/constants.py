"""
Constantes e padrões regex para normalização e avaliação de expressões.
"""

import re
from typing import Final

from amount_expression.core.types import ErrorKind

# =============================================================================
# NORMALIZAÇÃO
# =============================================================================

# Separador decimal aceito como alternativa ao ponto
DECIMAL_COMMA: Final[str] = ","
DECIMAL_POINT: Final[str] = "."

# Qualquer espaço em branco (inclusive tabulação e quebra de linha)
WHITESPACE_PATTERN: Final[re.Pattern] = re.compile(r"\s+")


# =============================================================================
# TOKENIZAÇÃO E AVALIAÇÃO
# =============================================================================

LEFT_PAREN: Final[str] = "("
RIGHT_PAREN: Final[str] = ")"

# O menos unário liga mais forte que qualquer operador binário
UNARY_MINUS_PRECEDENCE: Final[int] = 3


# =============================================================================
# MENSAGENS DE ERRO (exibidas ao lado do campo de valor)
# =============================================================================

ERROR_MESSAGES: Final[dict[ErrorKind, str]] = {
    ErrorKind.EMPTY_INPUT: "Informe o valor",
    ErrorKind.INVALID_CHARACTER: "Use apenas números e + - * / ( )",
    ErrorKind.INVALID_NUMBER_FORMAT: "Número inválido",
    ErrorKind.INVALID_EXPRESSION: "Expressão inválida",
    ErrorKind.UNBALANCED_PARENTHESES: "Parênteses inválidos",
    ErrorKind.NON_POSITIVE_AMOUNT: "Valor deve ser positivo",
    ErrorKind.EXPRESSION_TOO_LONG: "Expressão muito longa",
}


# =============================================================================
# TECLADO NUMÉRICO
# =============================================================================

# (id, rótulo, tipo, token) na ordem de exibição, 4 colunas
KEYPAD_LAYOUT: Final[list[tuple[str, str, str, str | None]]] = [
    ("7", "7", "digit", None),
    ("8", "8", "digit", None),
    ("9", "9", "digit", None),
    ("del", "⌫", "action", None),
    ("4", "4", "digit", None),
    ("5", "5", "digit", None),
    ("6", "6", "digit", None),
    ("/", "÷", "operator", "/"),
    ("1", "1", "digit", None),
    ("2", "2", "digit", None),
    ("3", "3", "digit", None),
    ("*", "×", "operator", "*"),
    ("0", "0", "digit", None),
    (".", ",", "digit", ","),
    ("-", "-", "operator", "-"),
    ("+", "+", "operator", "+"),
    ("(", "(", "operator", "("),
    (")", ")", "operator", ")"),
    ("00", "00", "digit", None),
    ("c", "C", "action", None),
]

ACTION_DELETE: Final[str] = "del"
ACTION_CLEAR: Final[str] = "c"
