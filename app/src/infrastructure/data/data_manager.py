"""Gerenciador singleton das bases acadêmicas.

Responsabilidades:
- Carregar as tabelas do disco uma única vez
- Expor os repositórios carregados
- Garantir thread-safety na (re)carga
"""

from threading import Lock, RLock
from typing import Optional

from src.infrastructure.data.attendance_repository import RepositorioPresencas
from src.infrastructure.data.data_loader import CarregadorDados
from src.infrastructure.data.enrollment_repository import RepositorioMatriculas
from src.infrastructure.data.grade_repository import RepositorioNotas
from src.util.logger import logger


class GerenciadorDados:
    """Singleton thread-safe para os repositórios de notas, presenças e matrículas.

    Responsabilidades:
    - Controlar a instância única
    - Manter os repositórios em memória
    - Evitar recargas desnecessárias
    """

    _instancia = None
    _lock = Lock()
    _dados_lock = RLock()
    _notas: Optional[RepositorioNotas] = None
    _presencas: Optional[RepositorioPresencas] = None
    _matriculas: Optional[RepositorioMatriculas] = None

    def __new__(cls):
        """Cria ou reutiliza a instância única.

        Retorno:
        - GerenciadorDados: instância singleton
        """
        if cls._instancia is None:
            with cls._lock:
                if cls._instancia is None:
                    cls._instancia = super(GerenciadorDados, cls).__new__(cls)
        return cls._instancia

    def carregar_dados(self, force: bool = False) -> None:
        """Carrega as tabelas do disco para a memória.

        Parâmetros:
        - force (bool): recarrega mesmo quando os dados já existem em memória

        Exceções:
        - FileNotFoundError: quando uma tabela obrigatória não existe
        - ValueError: quando uma tabela viola o contrato
        """
        with self._dados_lock:
            if self._notas is not None and not force:
                logger.info("Bases acadêmicas já carregadas em memória. Reutilizando.")
                return

            try:
                carregador = CarregadorDados()
                notas = RepositorioNotas(carregador.carregar_notas())
                presencas = RepositorioPresencas(carregador.carregar_presencas())
                matriculas = RepositorioMatriculas(
                    carregador.carregar_matriculas(),
                    grupos=carregador.carregar_grupos(),
                    grupos_adicionais=notas.ids_grupos() | presencas.ids_grupos(),
                )
            except Exception as erro:
                logger.critical(f"Falha fatal ao carregar as bases acadêmicas: {erro}")
                raise erro

            GerenciadorDados._notas = notas
            GerenciadorDados._presencas = presencas
            GerenciadorDados._matriculas = matriculas
            logger.info(
                f"Bases carregadas: {len(notas)} notas, {len(presencas)} presenças, "
                f"{len(matriculas)} matrículas."
            )

    def _garantir_carga(self) -> None:
        if self._notas is None:
            self.carregar_dados()
        if self._notas is None:
            raise RuntimeError("Bases acadêmicas indisponíveis.")

    def obter_repositorio_notas(self) -> RepositorioNotas:
        """Retorna o repositório de notas, carregando se necessário.

        Exceções:
        - RuntimeError: quando as bases não estão disponíveis
        """
        self._garantir_carga()
        return self._notas

    def obter_repositorio_presencas(self) -> RepositorioPresencas:
        """Retorna o repositório de presenças, carregando se necessário."""
        self._garantir_carga()
        return self._presencas

    def obter_repositorio_matriculas(self) -> RepositorioMatriculas:
        """Retorna o repositório de matrículas, carregando se necessário."""
        self._garantir_carga()
        return self._matriculas
