"""
Tokenizer de expressões de valor.
Converte o texto normalizado em números, operadores e parênteses.
"""

import math
import string
from typing import Optional

from amount_expression.config.logging_config import LoggerMixin
from amount_expression.core.constants import DECIMAL_POINT, LEFT_PAREN, RIGHT_PAREN
from amount_expression.core.exceptions import (
    InvalidCharacterError,
    InvalidNumberFormatError,
)
from amount_expression.core.models import Token
from amount_expression.core.types import Operator, TokenKind


class ExpressionTokenizer(LoggerMixin):
    """
    Tokenizer da linguagem do campo de valor.
    Reescreve o menos unário como `0 - x` para que o avaliador só veja
    operadores binários.
    """

    def tokenize(self, normalized: str) -> list[Token]:
        """
        Varre o texto da esquerda para a direita.

        Args:
            normalized: Saída do ExpressionNormalizer

        Returns:
            Sequência de tokens

        Raises:
            InvalidCharacterError: Caractere fora da linguagem
            InvalidNumberFormatError: Literal numérico malformado
        """
        tokens: list[Token] = []
        i = 0

        while i < len(normalized):
            c = normalized[i]

            if c == LEFT_PAREN:
                tokens.append(Token.lparen())
                i += 1
                continue

            if c == RIGHT_PAREN:
                tokens.append(Token.rparen())
                i += 1
                continue

            if c in Operator.symbols():
                op = Operator(c)
                previous = tokens[-1] if tokens else None

                if op == Operator.SUB and self._expects_operand(previous):
                    tokens.append(Token.number(0.0))
                    tokens.append(Token.op(Operator.SUB, unary=True))
                else:
                    tokens.append(Token.op(op))
                i += 1
                continue

            if c in string.digits or c == DECIMAL_POINT:
                end = self._scan_number(normalized, i)
                tokens.append(Token.number(self._parse_number(normalized[i:end], i)))
                i = end
                continue

            raise InvalidCharacterError(
                character=c,
                expression=normalized,
                position=i,
            )

        self.logger.debug(
            "Expressão tokenizada",
            expression=normalized[:50],
            tokens=len(tokens),
        )
        return tokens

    @staticmethod
    def _expects_operand(previous: Optional[Token]) -> bool:
        """Um `-` é unário no início, depois de `(` ou de outro operador."""
        if previous is None:
            return True
        return previous.kind == TokenKind.LPAREN or previous.is_operator

    @staticmethod
    def _scan_number(text: str, start: int) -> int:
        """Retorna o fim da sequência máxima de dígitos e pontos."""
        end = start
        while end < len(text) and (text[end] in string.digits or text[end] == DECIMAL_POINT):
            end += 1
        return end

    def _parse_number(self, literal: str, position: int) -> float:
        """
        Converte um literal numérico para float.

        Raises:
            InvalidNumberFormatError: Mais de um ponto, ponto solto ou
                valor não finito
        """
        if literal.count(DECIMAL_POINT) > 1 or literal == DECIMAL_POINT:
            raise InvalidNumberFormatError(literal=literal, position=position)

        try:
            value = float(literal)
        except ValueError as e:
            raise InvalidNumberFormatError(
                literal=literal,
                position=position,
                cause=e,
            ) from e

        if not math.isfinite(value):
            raise InvalidNumberFormatError(literal=literal, position=position)

        return value
