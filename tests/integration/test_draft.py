"""
Testes de integração para o rascunho da folha de valor.
"""

import pytest

from amount_expression.core.types import ErrorKind, KeyKind
from amount_expression.draft import KEYPAD_KEYS, AmountDraft, get_key


class TestKeypadLayout:
    """Testes para o teclado numérico."""

    def test_vinte_teclas(self):
        """Testa layout 4x5."""
        assert len(KEYPAD_KEYS) == 20
        assert len({k.id for k in KEYPAD_KEYS}) == 20

    def test_tipos(self):
        """Testa classificação das teclas."""
        assert get_key("7").kind == KeyKind.DIGIT
        assert get_key("/").kind == KeyKind.OPERATOR
        assert get_key("del").kind == KeyKind.ACTION
        assert get_key(".").text == ","

    def test_tecla_desconhecida(self):
        """Testa erro para id inexistente."""
        with pytest.raises(ValueError, match="Tecla desconhecida"):
            get_key("=")


class TestAmountDraft:
    """Testes para AmountDraft."""

    # TESTES: EDIÇÃO

    class TestEditing:
        """Testes de edição pelo teclado."""

        def test_digitos_e_operadores(self, draft):
            """Testa sequência simples."""
            draft.press_many(["1", "0", "+", "5"])

            assert draft.text == "10+5"
            assert draft.preview == 15.0

        def test_tecla_decimal_insere_virgula(self, draft):
            """Testa 7,50."""
            draft.press_many(["7", ".", "5", "0"])

            assert draft.text == "7,50"
            assert draft.preview == 7.5

        def test_duplo_zero(self, draft):
            draft.press_many(["1", "00"])

            assert draft.text == "100"

        def test_operador_substitui_operador(self, draft):
            """Testa que '+' seguido de '*' vira '*'."""
            draft.press_many(["9", "+", "*", "2"])

            assert draft.text == "9*2"

        def test_operador_substitui_ignorando_espacos(self, draft):
            """Testa substituição com espaço no final do texto."""
            draft.input("9 + ")
            draft.press(get_key("-"))

            assert draft.text == "9 -"

        def test_parenteses_nao_substituem(self, draft):
            """Testa que '(' após operador é anexado."""
            draft.press_many(["2", "*", "(", "3", "+", "1", ")"])

            assert draft.text == "2*(3+1)"
            assert draft.preview == 8.0

        def test_apagar(self, draft):
            """Testa a tecla del."""
            draft.press_many(["1", "2", "3", "del"])

            assert draft.text == "12"

        def test_apagar_vazio(self, draft):
            """Testa del com rascunho vazio."""
            draft.press(get_key("del"))

            assert draft.text == ""

        def test_limpar(self, draft):
            """Testa a tecla C."""
            draft.press_many(["1", "2", "c"])

            assert draft.text == ""
            assert draft.preview is None
            assert draft.live_error is None

    # TESTES: FEEDBACK AO VIVO

    class TestLiveFeedback:
        """Testes de pré-visualização."""

        def test_erro_ao_vivo(self, draft):
            draft.press_many(["5", "+"])

            assert draft.preview is None
            assert draft.live_error == "Expressão inválida"

        def test_rascunho_inicial(self, pipeline):
            draft = AmountDraft("20-3", pipeline=pipeline)

            assert draft.preview == 17.0

    # TESTES: CONFIRMAÇÃO

    class TestConfirm:
        """Testes de confirmação."""

        def test_confirma_valor(self, draft):
            draft.input("10 + 5")

            result = draft.confirm()

            assert result.ok
            assert result.value == 15.0
            assert draft.confirmed == "10 + 5"
            assert draft.error is None

        def test_confirma_erro(self, draft):
            draft.press_many(["-", "5"])

            result = draft.confirm()

            assert result.error == ErrorKind.NON_POSITIVE_AMOUNT
            assert draft.error == "Valor deve ser positivo"
            assert draft.confirmed is None

        def test_confirma_vazio(self, draft):
            result = draft.confirm()

            assert result.error == ErrorKind.EMPTY_INPUT
            assert draft.error == "Informe o valor"

        def test_tecla_limpa_erro_de_confirmacao(self, draft):
            """Testa que pressionar tecla apaga o erro exibido."""
            draft.confirm()
            draft.press(get_key("5"))

            assert draft.error is None

        def test_digitacao_limpa_erro_de_confirmacao(self, draft):
            draft.confirm()
            draft.input("5")

            assert draft.error is None
