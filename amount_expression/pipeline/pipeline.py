"""
Pipeline de avaliação completo.
Orquestra normalizer, tokenizer, evaluator e validator.
"""

from typing import Iterable, Optional

from amount_expression.config.logging_config import LoggerMixin
from amount_expression.config.settings import Settings, get_settings
from amount_expression.core.exceptions import (
    AmountExpressionError,
    EmptyInputError,
    ExpressionTooLongError,
)
from amount_expression.core.models import AmountResult
from amount_expression.core.types import ErrorKind

from amount_expression.pipeline.normalizer import ExpressionNormalizer
from amount_expression.pipeline.tokenizer import ExpressionTokenizer
from amount_expression.pipeline.evaluator import ExpressionEvaluator
from amount_expression.pipeline.validator import AmountValidator


class AmountPipeline(LoggerMixin):
    """
    Pipeline do campo de valor.
    Fluxo: texto -> texto normalizado -> tokens -> número -> valor validado
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Inicializa o pipeline com seus componentes."""
        settings = settings or get_settings()
        self.max_expression_length = settings.max_expression_length
        self.normalizer = ExpressionNormalizer()
        self.tokenizer = ExpressionTokenizer()
        self.evaluator = ExpressionEvaluator()
        self.validator = AmountValidator(settings.amount_decimal_places)

    def parse_amount_expression(self, raw: Optional[str]) -> AmountResult:
        """
        Avalia a expressão digitada e retorna o resultado.

        Falhas de qualquer etapa viram um AmountResult com o motivo;
        nenhuma etapa produz resultado parcial.

        Args:
            raw: Texto do campo de valor

        Returns:
            AmountResult com valor validado ou erro
        """
        raw = raw or ""

        try:
            value = self._run(raw)
        except AmountExpressionError as e:
            self.logger.debug(
                "Expressão rejeitada",
                expression=raw[:50],
                kind=e.kind.value,
                details=e.details,
            )
            return AmountResult.failure(raw, e)

        self.logger.debug("Expressão avaliada", expression=raw[:50], value=value)
        return AmountResult.success(raw, value)

    def evaluate(self, raw: Optional[str]) -> float:
        """
        Variante que levanta exceção em vez de retornar resultado.

        Raises:
            AmountExpressionError: Subclasse do motivo da rejeição
        """
        return self._run(raw or "")

    def _run(self, raw: str) -> float:
        # Etapa 1: Normalização
        normalized = self.normalizer.normalize(raw)
        if not normalized:
            raise EmptyInputError()

        if len(normalized) > self.max_expression_length:
            raise ExpressionTooLongError(
                length=len(normalized),
                limit=self.max_expression_length,
            )

        # Etapa 2: Tokenização
        tokens = self.tokenizer.tokenize(normalized)

        # Etapa 3: Avaliação
        value = self.evaluator.evaluate(tokens)

        # Etapa 4: Validação
        return self.validator.validate(value)

    def preview(self, raw: Optional[str]) -> Optional[float]:
        """Valor para pré-visualização; None se vazio ou inválido."""
        if self.normalizer.is_blank(raw):
            return None
        return self.parse_amount_expression(raw).value

    def live_error(self, raw: Optional[str]) -> Optional[str]:
        """Mensagem de erro ao vivo; None se vazio ou válido."""
        if self.normalizer.is_blank(raw):
            return None
        return self.parse_amount_expression(raw).message

    def process_batch(
        self,
        expressions: Iterable[str],
    ) -> list[AmountResult]:
        """
        Avalia um lote de expressões.

        Args:
            expressions: Expressões a avaliar

        Returns:
            Um resultado por expressão, na mesma ordem
        """
        results = [self.parse_amount_expression(e) for e in expressions]

        self.log_operation("process_batch").info(
            "Lote avaliado",
            total=len(results),
            success=sum(1 for r in results if r.ok),
            errors=sum(1 for r in results if not r.ok),
        )

        return results

    def get_statistics(
        self,
        results: list[AmountResult],
    ) -> dict:
        """
        Calcula estatísticas de um conjunto de resultados.

        Args:
            results: Resultados de avaliação

        Returns:
            Dicionário com estatísticas
        """
        if not results:
            return {
                "total": 0,
                "success": 0,
                "failed": 0,
                "by_error": {},
                "structural": 0,
                "amount_stats": {},
            }

        amounts = [r.value for r in results if r.ok]

        # Agrupa por motivo de rejeição
        by_error: dict[str, int] = {}
        for result in results:
            if result.error is not None:
                kind = result.error.value
                by_error[kind] = by_error.get(kind, 0) + 1

        amount_stats = {}
        if amounts:
            amount_stats = {
                "sum": self.validator.round_amount(sum(amounts)),
                "min": min(amounts),
                "max": max(amounts),
            }

        return {
            "total": len(results),
            "success": len(amounts),
            "failed": len(results) - len(amounts),
            "by_error": by_error,
            "structural": sum(
                by_error.get(kind.value, 0) for kind in ErrorKind.structural()
            ),
            "amount_stats": amount_stats,
        }


def parse_amount_expression(raw: Optional[str]) -> AmountResult:
    """Avalia uma expressão com o pipeline padrão."""
    return AmountPipeline().parse_amount_expression(raw)
