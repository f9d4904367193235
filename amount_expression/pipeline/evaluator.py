"""
Avaliador de expressões por precedência de operadores (shunting-yard).
Usa uma pilha de operandos e uma pilha de operadores, sem montar árvore.
"""

import math

from amount_expression.config.logging_config import LoggerMixin
from amount_expression.core.constants import UNARY_MINUS_PRECEDENCE
from amount_expression.core.exceptions import (
    InvalidExpressionError,
    UnbalancedParenthesesError,
)
from amount_expression.core.models import Token
from amount_expression.core.types import TokenKind


class ExpressionEvaluator(LoggerMixin):
    """
    Avaliador de duas pilhas.

    Precedência: * e / = 2, + e - = 1, todos associativos à esquerda.
    O menos unário sintetizado pelo tokenizer tem precedência 3 e é
    associativo à direita, então `5*-2` vale -10 e `--5` vale 5.
    """

    def evaluate(self, tokens: list[Token]) -> float:
        """
        Avalia uma sequência de tokens.

        Args:
            tokens: Saída do ExpressionTokenizer

        Returns:
            Valor numérico da expressão

        Raises:
            InvalidExpressionError: Operador sem operandos, operandos
                sobrando, divisão por zero ou resultado não finito
            UnbalancedParenthesesError: Parênteses sem par
        """
        values: list[float] = []
        ops: list[Token] = []

        for token in tokens:
            if token.kind == TokenKind.NUMBER:
                values.append(token.value)

            elif token.kind == TokenKind.LPAREN:
                ops.append(token)

            elif token.kind == TokenKind.RPAREN:
                while ops and ops[-1].kind != TokenKind.LPAREN:
                    self._reduce_once(values, ops)
                if not ops:
                    raise UnbalancedParenthesesError()
                ops.pop()

            else:
                while (
                    ops
                    and ops[-1].kind != TokenKind.LPAREN
                    and self._should_reduce(ops[-1], token)
                ):
                    self._reduce_once(values, ops)
                ops.append(token)

        while ops:
            if ops[-1].kind == TokenKind.LPAREN:
                raise UnbalancedParenthesesError()
            self._reduce_once(values, ops)

        if len(values) != 1:
            raise InvalidExpressionError(details={"operands_left": len(values)})

        return values[0]

    @staticmethod
    def precedence(token: Token) -> int:
        """Precedência efetiva de um token de operador."""
        if token.unary:
            return UNARY_MINUS_PRECEDENCE
        return token.operator.precedence

    def _should_reduce(self, top: Token, incoming: Token) -> bool:
        """Decide se o operador pendente deve ser aplicado antes do novo."""
        if incoming.unary:
            return self.precedence(top) > self.precedence(incoming)
        return self.precedence(top) >= self.precedence(incoming)

    def _reduce_once(self, values: list[float], ops: list[Token]) -> None:
        """Aplica o operador do topo aos dois operandos do topo."""
        if not ops or ops[-1].kind == TokenKind.LPAREN:
            raise InvalidExpressionError()
        op = ops.pop()

        if len(values) < 2:
            raise InvalidExpressionError(details={"operator": op.operator.value})
        b = values.pop()
        a = values.pop()

        try:
            result = op.operator.apply(a, b)
        except (ZeroDivisionError, OverflowError) as e:
            self.logger.debug("Operação sem resultado finito", a=a, b=b, error=str(e))
            raise InvalidExpressionError(cause=e) from e

        if not math.isfinite(result):
            raise InvalidExpressionError(details={"operator": op.operator.value})

        values.append(result)
