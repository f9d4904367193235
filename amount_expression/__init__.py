"""
Avaliador de expressões do campo de valor de transações.
"""

__version__ = "0.1.0"

from amount_expression.core import AmountResult, ErrorKind
from amount_expression.pipeline import AmountPipeline, parse_amount_expression
from amount_expression.draft import AmountDraft, KEYPAD_KEYS

__all__ = [
    "__version__",
    "AmountResult",
    "ErrorKind",
    "AmountPipeline",
    "parse_amount_expression",
    "AmountDraft",
    "KEYPAD_KEYS",
]
