"""Ponto de entrada da API FastAPI.

Responsabilidades:
- Configurar a aplicação FastAPI
- Registrar rotas e eventos
- Carregar as bases acadêmicas no startup
"""

import uvicorn
from fastapi import FastAPI, HTTPException

from src.api.attendance_controller import ControladorPresenca
from src.api.data_controller import ControladorDados
from src.api.ranking_controller import ControladorRanking
from src.application.data_runtime_service import carregar_dados_runtime, criar_servico_ranking
from src.config.settings import Configuracoes
from src.util.logger import logger

app = FastAPI(
    title="Ranking Acadêmico",
    description="API de ranking de desempenho e resumo de presença por grupo",
    version="1.0.0",
)


@app.on_event("startup")
async def evento_inicializacao():
    """Executa ações de inicialização da aplicação.

    Responsabilidades:
    - Registrar log de inicialização
    - Carregar as bases em memória sem derrubar a API quando ausentes
    """
    logger.info("Inicializando recursos da API...")
    try:
        carregar_dados_runtime()
    except (FileNotFoundError, ValueError) as erro:
        logger.error(f"API iniciada sem bases acadêmicas: {erro}")


controlador_ranking = ControladorRanking()
app.include_router(controlador_ranking.roteador, prefix="/api/v1", tags=["Ranking"])

controlador_presenca = ControladorPresenca()
app.include_router(controlador_presenca.roteador, prefix="/api/v1", tags=["Presença"])

controlador_dados = ControladorDados()
app.include_router(controlador_dados.roteador, prefix="/api/v1", tags=["Administração"])


@app.get("/health", tags=["Infraestrutura"])
def checar_saude():
    """Endpoint de health check.

    Retorno:
    - dict: status da aplicação
    """
    try:
        criar_servico_ranking()
        return {"status": "ok"}
    except Exception as erro:
        raise HTTPException(status_code=503, detail=str(erro))


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=Configuracoes.PORT)
