"""
Módulo de pipeline: normalização, tokenização, avaliação e validação.
"""

from amount_expression.pipeline.normalizer import ExpressionNormalizer
from amount_expression.pipeline.tokenizer import ExpressionTokenizer
from amount_expression.pipeline.evaluator import ExpressionEvaluator
from amount_expression.pipeline.validator import AmountValidator
from amount_expression.pipeline.pipeline import AmountPipeline, parse_amount_expression

__all__ = [
    "ExpressionNormalizer",
    "ExpressionTokenizer",
    "ExpressionEvaluator",
    "AmountValidator",
    "AmountPipeline",
    "parse_amount_expression",
]
