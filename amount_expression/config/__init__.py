"""
Módulo de configuração do sistema.
Exporta as configurações principais para uso em todo o projeto.
"""

from amount_expression.config.settings import Settings, get_settings
from amount_expression.config.logging_config import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
]
