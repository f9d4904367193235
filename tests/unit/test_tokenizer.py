"""
Testes unitários para o Tokenizer de expressões.
"""

import pytest

from amount_expression.core.exceptions import (
    InvalidCharacterError,
    InvalidNumberFormatError,
)
from amount_expression.core.models import Token
from amount_expression.core.types import ErrorKind, Operator, TokenKind


def render(tokens: list[Token]) -> list[str]:
    """Representação compacta de uma sequência de tokens."""
    return [str(t) for t in tokens]


class TestExpressionTokenizer:
    """Testes para ExpressionTokenizer."""

    # TESTES: NÚMEROS

    class TestNumbers:
        """Testes para literais numéricos."""

        def test_inteiro(self, tokenizer):
            """Testa literal inteiro."""
            tokens = tokenizer.tokenize("42")

            assert tokens == [Token.number(42.0)]

        def test_decimal(self, tokenizer):
            """Testa literal decimal."""
            assert tokenizer.tokenize("10.50") == [Token.number(10.5)]

        def test_ponto_final(self, tokenizer):
            """Testa '5.' como 5."""
            assert tokenizer.tokenize("5.") == [Token.number(5.0)]

        def test_ponto_inicial(self, tokenizer):
            """Testa '.5' como 0.5."""
            assert tokenizer.tokenize(".5") == [Token.number(0.5)]

        @pytest.mark.parametrize("literal", ["1..2", "1.2.3", "..5"])
        def test_dois_pontos(self, tokenizer, literal):
            """Testa que dois pontos no mesmo número é erro."""
            with pytest.raises(InvalidNumberFormatError) as exc_info:
                tokenizer.tokenize(literal)

            assert exc_info.value.kind == ErrorKind.INVALID_NUMBER_FORMAT
            assert exc_info.value.details["literal"] == literal

        def test_ponto_solto(self, tokenizer):
            """Testa que '.' sozinho é erro."""
            with pytest.raises(InvalidNumberFormatError):
                tokenizer.tokenize("5+.")

        def test_numero_nao_finito(self, tokenizer):
            """Testa que overflow para infinito é erro de formato."""
            with pytest.raises(InvalidNumberFormatError):
                tokenizer.tokenize("9" * 400)

    # TESTES: OPERADORES E PARÊNTESES

    class TestOperators:
        """Testes para operadores binários e parênteses."""

        def test_quatro_operadores(self, tokenizer):
            """Testa + - * /."""
            tokens = tokenizer.tokenize("1+2-3*4/5")

            assert render(tokens) == ["1", "+", "2", "-", "3", "*", "4", "/", "5"]
            assert not any(t.unary for t in tokens)

        def test_parenteses(self, tokenizer):
            """Testa ( e )."""
            tokens = tokenizer.tokenize("(2+3)*4")

            assert tokens[0].kind == TokenKind.LPAREN
            assert tokens[4].kind == TokenKind.RPAREN
            assert render(tokens) == ["(", "2", "+", "3", ")", "*", "4"]

        def test_mais_unario_nao_tratado(self, tokenizer):
            """Testa que '+' inicial vira operador binário."""
            tokens = tokenizer.tokenize("+5")

            assert tokens == [Token.op(Operator.ADD), Token.number(5.0)]

    # TESTES: MENOS UNÁRIO

    class TestUnaryMinus:
        """Testes para a reescrita do menos unário."""

        def test_no_inicio(self, tokenizer):
            """Testa '-5' -> 0 - 5."""
            tokens = tokenizer.tokenize("-5")

            assert tokens == [
                Token.number(0.0),
                Token.op(Operator.SUB, unary=True),
                Token.number(5.0),
            ]

        def test_apos_operador(self, tokenizer):
            """Testa '5*-2'."""
            tokens = tokenizer.tokenize("5*-2")

            assert render(tokens) == ["5", "*", "0", "-", "2"]
            assert tokens[3].unary

        def test_apos_abre_parenteses(self, tokenizer):
            """Testa '(-3)'."""
            tokens = tokenizer.tokenize("(-3)")

            assert render(tokens) == ["(", "0", "-", "3", ")"]
            assert tokens[2].unary

        def test_menos_binario(self, tokenizer):
            """Testa que '5-2' e '(1)-2' são subtrações."""
            assert not tokenizer.tokenize("5-2")[1].unary
            assert not tokenizer.tokenize("(1)-2")[3].unary

        def test_menos_duplo(self, tokenizer):
            """Testa '--5' com dois menos unários."""
            tokens = tokenizer.tokenize("--5")

            assert render(tokens) == ["0", "-", "0", "-", "5"]
            assert tokens[1].unary and tokens[3].unary

    # TESTES: CARACTERES INVÁLIDOS

    class TestInvalidCharacters:
        """Testes para caracteres fora da linguagem."""

        @pytest.mark.parametrize("text", ["12a", "R$10", "2^3", "10%", "1e5", "x"])
        def test_caractere_invalido(self, tokenizer, text):
            """Testa rejeição de letras e símbolos."""
            with pytest.raises(InvalidCharacterError) as exc_info:
                tokenizer.tokenize(text)

            assert exc_info.value.kind == ErrorKind.INVALID_CHARACTER
            assert exc_info.value.message == "Use apenas números e + - * / ( )"

        def test_posicao_do_erro(self, tokenizer):
            """Testa que o primeiro caractere inválido é reportado."""
            with pytest.raises(InvalidCharacterError) as exc_info:
                tokenizer.tokenize("10+ab")

            assert exc_info.value.character == "a"
            assert exc_info.value.details["position"] == 3

        def test_falha_no_primeiro_erro(self, tokenizer):
            """Testa fail-fast: número malformado antes do caractere inválido."""
            with pytest.raises(InvalidNumberFormatError):
                tokenizer.tokenize("1..2+a")

        def test_sequencia_vazia(self, tokenizer):
            """Testa entrada vazia."""
            assert tokenizer.tokenize("") == []
