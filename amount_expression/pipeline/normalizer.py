"""
Normalizador de expressões de valor.
Canoniza separador decimal e remove espaços antes da tokenização.
"""

from typing import Optional

from amount_expression.config.logging_config import LoggerMixin
from amount_expression.core.constants import (
    DECIMAL_COMMA,
    DECIMAL_POINT,
    WHITESPACE_PATTERN,
)


class ExpressionNormalizer(LoggerMixin):
    """
    Normalizador de expressões digitadas no campo de valor.
    Não falha: uma string vazia é rejeitada pelas etapas seguintes.
    """

    def normalize(self, raw: Optional[str]) -> str:
        """
        Normaliza a entrada do usuário.

        Exemplos:
            " 10 + 5 " -> "10+5"
            "7,50" -> "7.50"
            "(20 - 3) * 2" -> "(20-3)*2"

        Args:
            raw: Texto digitado (None equivale a vazio)

        Returns:
            Texto normalizado
        """
        if not raw:
            return ""

        cleaned = raw.strip().replace(DECIMAL_COMMA, DECIMAL_POINT)
        return WHITESPACE_PATTERN.sub("", cleaned)

    def is_blank(self, raw: Optional[str]) -> bool:
        """Indica se a entrada fica vazia após a normalização."""
        return self.normalize(raw) == ""
