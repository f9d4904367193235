"""
Configurações e fixtures compartilhadas para pytest.
"""

from pathlib import Path
from typing import Callable, Generator

import pytest
import structlog

from amount_expression.config.settings import Settings, get_settings
from amount_expression.draft import AmountDraft
from amount_expression.pipeline import (
    AmountPipeline,
    AmountValidator,
    ExpressionEvaluator,
    ExpressionNormalizer,
    ExpressionTokenizer,
)


# ISOLAMENTO DE CONFIGURAÇÃO E LOGGING

@pytest.fixture(autouse=True)
def reset_global_state() -> Generator[None, None, None]:
    """Evita que settings e structlog vazem entre testes (a CLI reconfigura)."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def settings() -> Settings:
    """Settings padrão, sem .env."""
    return Settings(_env_file=None)


# FIXTURES DAS ETAPAS

@pytest.fixture
def normalizer() -> ExpressionNormalizer:
    return ExpressionNormalizer()


@pytest.fixture
def tokenizer() -> ExpressionTokenizer:
    return ExpressionTokenizer()


@pytest.fixture
def evaluator() -> ExpressionEvaluator:
    return ExpressionEvaluator()


@pytest.fixture
def validator() -> AmountValidator:
    return AmountValidator()


@pytest.fixture
def run(tokenizer, evaluator) -> Callable[[str], float]:
    """Tokeniza e avalia um texto já normalizado."""
    return lambda text: evaluator.evaluate(tokenizer.tokenize(text))


@pytest.fixture
def pipeline(settings) -> AmountPipeline:
    """Pipeline completo com settings padrão."""
    return AmountPipeline(settings)


@pytest.fixture
def draft(pipeline) -> AmountDraft:
    """Rascunho vazio da folha de valor."""
    return AmountDraft(pipeline=pipeline)


# FIXTURES DE ARQUIVOS

@pytest.fixture
def expressions_file(tmp_path) -> Path:
    """Arquivo com expressões válidas, inválidas e linhas em branco."""
    path = tmp_path / "expressions.txt"
    path.write_text(
        "10+5\n"
        "\n"
        "(2+3)*4\n"
        "7,50\n"
        "10/0\n"
        "-5\n"
        "   \n"
        "abc\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def mixed_expressions() -> list[str]:
    """Expressões cobrindo sucesso e cada tipo de erro."""
    return [
        "10+5",
        "2*3+4",
        "7,50",
        "",
        "10/0",
        "(1+2",
        "1..2",
        "12a",
        "-5",
    ]
