"""Fábrica de logger da aplicação.

Responsabilidades:
- Configurar loggers de forma padronizada
- Evitar duplicação de handlers
- Direcionar saída para stdout
"""

import logging
import sys

from src.config.settings import Configuracoes


class FabricaLogger:
    """Responsável por configurar e fornecer instâncias de Logger.

    Responsabilidades:
    - Configuração única por nome de logger
    - Formatação padronizada
    - Handler para console/Docker
    """

    FORMATO = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    FORMATO_DATA = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def configurar(cls, nome: str = "RANKING_ACADEMICO_APP", nivel: str | None = None):
        """Configura o logger se ainda não estiver configurado.

        Parâmetros:
        - nome (str): nome do logger
        - nivel (str | None): nível de log; usa Configuracoes.LOG_LEVEL quando omitido

        Retorno:
        - logging.Logger: logger configurado
        """
        logger_instancia = logging.getLogger(nome)

        if not logger_instancia.handlers:
            logger_instancia.setLevel(nivel or Configuracoes.LOG_LEVEL)

            handler_console = logging.StreamHandler(sys.stdout)
            handler_console.setFormatter(logging.Formatter(fmt=cls.FORMATO, datefmt=cls.FORMATO_DATA))
            logger_instancia.addHandler(handler_console)

            logger_instancia.propagate = False

        return logger_instancia


logger = FabricaLogger.configurar()
