"""Controlador de administração das bases acadêmicas.

Responsabilidades:
- Definir rota de recarga das tabelas
- Traduzir erros em respostas HTTP
"""

from fastapi import APIRouter, HTTPException

from src.application.data_runtime_service import carregar_dados_runtime


class ControladorDados:
    """Controlador para recarga das bases em memória."""

    def __init__(self):
        self.roteador = APIRouter()
        self.roteador.add_api_route(
            path="/data/reload",
            endpoint=self._recarregar_dados,
            methods=["POST"],
            response_model=dict,
            summary="Recarrega notas, presenças e matrículas do disco",
        )

    @staticmethod
    async def _recarregar_dados():
        """Recarrega as bases.

        Retorno:
        - dict: status da execução

        Exceções:
        - HTTPException: erro durante a recarga
        """
        try:
            carregar_dados_runtime(force=True)
            return {"status": "ok", "message": "Bases acadêmicas recarregadas com sucesso."}
        except (ValueError, TypeError, KeyError, FileNotFoundError) as erro:
            raise HTTPException(status_code=400, detail=str(erro))
        except RuntimeError as erro:
            raise HTTPException(status_code=503, detail=str(erro))
        except Exception as erro:
            raise HTTPException(status_code=500, detail=str(erro))
