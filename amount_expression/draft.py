"""
Rascunho da folha de valor.
Modela a edição pelo teclado numérico, a pré-visualização ao vivo e a
confirmação da expressão digitada no formulário de transação.
"""

from typing import Iterable, Optional

from amount_expression.config.logging_config import LoggerMixin
from amount_expression.core.constants import (
    ACTION_CLEAR,
    ACTION_DELETE,
    KEYPAD_LAYOUT,
)
from amount_expression.core.models import AmountResult, KeypadKey
from amount_expression.core.types import KeyKind, Operator
from amount_expression.pipeline import AmountPipeline


KEYPAD_KEYS: list[KeypadKey] = [
    KeypadKey(id=key_id, label=label, kind=KeyKind(kind), token=token)
    for key_id, label, kind, token in KEYPAD_LAYOUT
]

_KEYS_BY_ID: dict[str, KeypadKey] = {key.id: key for key in KEYPAD_KEYS}


def get_key(key_id: str) -> KeypadKey:
    """
    Retorna a tecla pelo id.

    Raises:
        ValueError: Se a tecla não existir no teclado
    """
    if key_id not in _KEYS_BY_ID:
        raise ValueError(
            f"Tecla desconhecida: {key_id}. "
            f"Disponíveis: {', '.join(_KEYS_BY_ID)}"
        )
    return _KEYS_BY_ID[key_id]


class AmountDraft(LoggerMixin):
    """
    Rascunho editável do campo de valor.

    Mantém o texto em edição, o erro da última confirmação e a expressão
    confirmada. Cada instância pertence a um único formulário.
    """

    def __init__(
        self,
        text: str = "",
        pipeline: Optional[AmountPipeline] = None,
    ):
        self.text = text
        self.error: Optional[str] = None
        self.confirmed: Optional[str] = None
        self.pipeline = pipeline or AmountPipeline()

    @property
    def preview(self) -> Optional[float]:
        return self.pipeline.preview(self.text)

    @property
    def live_error(self) -> Optional[str]:
        return self.pipeline.live_error(self.text)

    def input(self, text: str) -> None:
        """Substitui o texto (digitação direta no campo)."""
        self.error = None
        self.text = text

    def press(self, key: KeypadKey) -> None:
        """
        Aplica uma tecla ao rascunho.

        `del` apaga o último caractere e `c` limpa tudo. Um operador logo
        após outro operador substitui o anterior.
        """
        self.error = None

        if key.kind == KeyKind.ACTION:
            if key.id == ACTION_DELETE:
                self.text = self.text[:-1]
            elif key.id == ACTION_CLEAR:
                self.text = ""
            return

        trimmed = self.text.rstrip()
        last = trimmed[-1] if trimmed else ""

        if key.is_arithmetic and last and last in Operator.symbols():
            self.text = trimmed[:-1] + key.text
            return

        self.text += key.text

    def press_many(self, key_ids: Iterable[str]) -> None:
        """Aplica uma sequência de teclas pelos seus ids."""
        for key_id in key_ids:
            self.press(get_key(key_id))

    def confirm(self) -> AmountResult:
        """
        Confirma o rascunho.

        Returns:
            Resultado da avaliação; em caso de erro a mensagem fica em
            `error` e nada é confirmado
        """
        result = self.pipeline.parse_amount_expression(self.text)

        if not result.ok:
            self.error = result.message
            return result

        self.error = None
        self.confirmed = self.text
        self.logger.debug("Valor confirmado", expression=self.text, value=result.value)
        return result
