"""Exceções de domínio do núcleo de ranking e presença."""


class ErroNaoEncontrado(LookupError):
    """Recurso solicitado não existe ou não pode ser ranqueado.

    Usada quando o grupo não existe ou quando o aluno não possui matrícula
    ativa/notas no escopo consultado.
    """
