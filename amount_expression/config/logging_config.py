"""
Configuração de logging estruturado usando structlog.
Gera logs em formato JSON para produção e colorido para desenvolvimento.
Os logs vão para stderr para não misturar com a saída da CLI.
"""

import logging
import sys
from typing import Optional, TextIO

import structlog
from structlog.typing import Processor

from amount_expression.config.settings import get_settings


def setup_logging(
    level: str = "WARNING",
    json_format: bool = False,
    stream: Optional[TextIO] = None,
) -> structlog.BoundLogger:
    """
    Configura o sistema de logging.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR)
        json_format: Se True, usa formato JSON (produção)
        stream: Destino dos logs (padrão: stderr)

    Returns:
        Logger configurado
    """

    # Processadores comuns
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        # Formato JSON para produção
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        # Formato colorido para desenvolvimento
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger()


def configure_default_logging() -> None:
    """
    Aplica a configuração das settings se ninguém configurou o structlog.

    Sem isso o structlog usa seus padrões, que imprimem debug em stdout.
    Uma configuração feita antes pela aplicação ou pela CLI é mantida.
    """
    if structlog.is_configured():
        return

    settings = get_settings()
    setup_logging(level=settings.log_level, json_format=settings.log_json)


def get_logger(name: str = "amount_expression", **context) -> structlog.BoundLogger:
    """
    Retorna um logger com contexto.

    Args:
        name: Nome do logger
        **context: Contexto adicional para bind

    Returns:
        Logger com contexto
    """
    configure_default_logging()
    logger = structlog.get_logger(name)
    if context:
        logger = logger.bind(**context)
    return logger


class LoggerMixin:
    """Mixin para adicionar logging a classes."""

    @property
    def logger(self) -> structlog.BoundLogger:
        """Retorna logger com nome da classe."""
        if not hasattr(self, "_logger"):
            self._logger = get_logger(self.__class__.__name__)
        return self._logger

    def log_operation(
        self,
        operation: str,
        **kwargs,
    ) -> structlog.BoundLogger:
        """Retorna logger com operação bindada."""
        return self.logger.bind(operation=operation, **kwargs)
