"""
Erros tipados do store de empregadores
"""


class StoreError(Exception):
    """Base para qualquer falha vinda do store."""


class ConstraintViolation(StoreError):
    """NOT NULL ausente ou colisão de chave única (id, ou nome dentro de um lote)."""


class TransportFailure(StoreError):
    """Banco inacessível ou conexão perdida."""


class EmployerNotFound(StoreError):
    """Só levantado no update estrito; delete/consulta de id ausente não é erro."""

    def __init__(self, employer_id):
        super().__init__(f"Empregador {employer_id} não encontrado")
        self.employer_id = employer_id
