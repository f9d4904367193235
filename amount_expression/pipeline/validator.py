"""
Validador do valor monetário calculado.
Arredonda para centavos e rejeita valores não positivos.
"""

import math

from amount_expression.config.logging_config import LoggerMixin
from amount_expression.core.exceptions import (
    InvalidExpressionError,
    NonPositiveAmountError,
)


class AmountValidator(LoggerMixin):
    """
    Validador de valores de transação.
    O valor é sempre uma magnitude positiva; a direção (receita, despesa,
    transferência) fica com quem chama.
    """

    def __init__(self, decimal_places: int = 2):
        """
        Inicializa o validador.

        Args:
            decimal_places: Casas decimais para arredondamento
        """
        self.decimal_places = decimal_places
        self._scale = 10 ** decimal_places

    def round_amount(self, value: float) -> float:
        """Arredonda meio para cima: floor(v * 100 + 0.5) / 100."""
        return math.floor(value * self._scale + 0.5) / self._scale

    def validate(self, value: float) -> float:
        """
        Valida e arredonda o resultado da avaliação.

        Args:
            value: Resultado do ExpressionEvaluator

        Returns:
            Valor arredondado, estritamente positivo

        Raises:
            InvalidExpressionError: Valor não finito
            NonPositiveAmountError: Valor arredondado <= 0
        """
        if not math.isfinite(value) or not math.isfinite(value * self._scale):
            raise InvalidExpressionError(details={"value": str(value)})

        rounded = self.round_amount(value)

        if not rounded > 0:
            self.logger.debug("Valor não positivo", value=value, rounded=rounded)
            raise NonPositiveAmountError(value=rounded)

        return rounded
