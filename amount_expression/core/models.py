"""
Modelos de dados do avaliador.
Define tokens, resultado da avaliação e teclas do teclado numérico.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from pydantic import BaseModel, Field, computed_field, model_validator

from amount_expression.core.exceptions import AmountExpressionError
from amount_expression.core.types import Amount, ErrorKind, KeyKind, Operator, TokenKind


@dataclass(frozen=True)
class Token:
    """
    Unidade léxica produzida pelo tokenizer.

    `value` só é preenchido para números e `operator` só para operadores.
    `unary` marca o menos sintetizado a partir de um sinal negativo.
    """

    kind: TokenKind
    value: Optional[float] = None
    operator: Optional[Operator] = None
    unary: bool = False

    @classmethod
    def number(cls, value: float) -> "Token":
        return cls(TokenKind.NUMBER, value=value)

    @classmethod
    def op(cls, operator: Operator, unary: bool = False) -> "Token":
        return cls(TokenKind.OPERATOR, operator=operator, unary=unary)

    @classmethod
    def lparen(cls) -> "Token":
        return cls(TokenKind.LPAREN)

    @classmethod
    def rparen(cls) -> "Token":
        return cls(TokenKind.RPAREN)

    @property
    def is_operator(self) -> bool:
        return self.kind == TokenKind.OPERATOR

    def __str__(self) -> str:
        if self.kind == TokenKind.NUMBER:
            return f"{self.value:g}"
        if self.kind == TokenKind.OPERATOR:
            return self.operator.value
        return self.kind.value


class AmountResult(BaseModel):
    """
    Resultado de uma avaliação de expressão de valor.
    Contém o valor validado ou o motivo da rejeição, nunca ambos.
    """

    raw: str = Field(..., description="Entrada original do campo")
    value: Optional[Amount] = None
    error: Optional[ErrorKind] = None
    message: Optional[str] = None

    @model_validator(mode="after")
    def validate_outcome(self):
        """Garante que exatamente um entre valor e erro esteja presente."""
        if (self.value is None) == (self.error is None):
            raise ValueError("Resultado deve ter valor ou erro, nunca ambos")
        return self

    @classmethod
    def success(cls, raw: str, value: float) -> "AmountResult":
        return cls(raw=raw, value=value)

    @classmethod
    def failure(cls, raw: str, exc: AmountExpressionError) -> "AmountResult":
        return cls(raw=raw, error=exc.kind, message=exc.message)

    @computed_field
    @property
    def ok(self) -> bool:
        """Indica se a expressão foi aceita."""
        return self.error is None

    def as_decimal(self, decimal_places: int = 2) -> Optional[Decimal]:
        """Retorna o valor como Decimal quantizado, ou None em caso de erro."""
        if self.value is None:
            return None
        return Decimal(repr(self.value)).quantize(
            Decimal(10) ** -decimal_places,
            rounding=ROUND_HALF_UP,
        )


class KeypadKey(BaseModel):
    """Tecla do teclado numérico da folha de valor."""

    id: str
    label: str
    kind: KeyKind
    token: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def text(self) -> str:
        """Texto inserido no rascunho ao pressionar a tecla."""
        return self.token if self.token is not None else self.label

    @property
    def is_arithmetic(self) -> bool:
        """Indica se a tecla insere um dos quatro operadores."""
        return self.kind == KeyKind.OPERATOR and self.text in Operator.symbols()
