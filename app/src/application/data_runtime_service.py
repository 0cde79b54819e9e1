"""Serviços de runtime para acesso às bases acadêmicas.

Responsabilidades:
- Encapsular acesso ao gerenciador de dados da infraestrutura
- Montar os serviços de aplicação com os repositórios carregados
"""

from src.application.attendance_service import ServicoPresenca
from src.application.ranking_service import ServicoRanking
from src.infrastructure.data.data_manager import GerenciadorDados


def carregar_dados_runtime(force: bool = False) -> None:
    """Carrega as bases em memória via gerenciador de infraestrutura."""
    GerenciadorDados().carregar_dados(force=force)


def criar_servico_ranking() -> ServicoRanking:
    """Cria o serviço de ranking sobre as bases carregadas."""
    gerenciador = GerenciadorDados()
    return ServicoRanking(
        repositorio_notas=gerenciador.obter_repositorio_notas(),
        repositorio_matriculas=gerenciador.obter_repositorio_matriculas(),
    )


def criar_servico_presenca() -> ServicoPresenca:
    """Cria o serviço de presença sobre as bases carregadas."""
    gerenciador = GerenciadorDados()
    return ServicoPresenca(
        repositorio_presencas=gerenciador.obter_repositorio_presencas(),
        repositorio_matriculas=gerenciador.obter_repositorio_matriculas(),
    )
