"""
Repositório de empregadores: superfície de CRUD usada pelas rotas
"""
import logging
from typing import Any, Iterable, List, NamedTuple, Optional

from sqlalchemy.orm import Session

from schemas.employers import Employer
from services.employer_store import EmployerStore

logger = logging.getLogger(__name__)


class SaveStatus(NamedTuple):
    created: bool
    updated: bool
    rows_changed: int


class EmployerRepository:

    def __init__(self, db: Session):
        self.store = EmployerStore(db)

    # ---------------- Create ----------------
    def create(self, employer: Employer) -> Employer:
        employer = self.store.insert_row(employer)
        logger.info(f"Empregador #{employer.id} criado")
        return employer

    def create_many(self, employers: Iterable[Employer]) -> List[Employer]:
        employers = self.store.insert_rows(employers)
        logger.info(f"{len(employers)} empregadores criados em lote")
        return employers

    def create_or_update(self, employer: Employer) -> SaveStatus:
        """
        Atualiza se `employer.id` já existe na tabela; senão insere
        (e aí o banco escolhe o id).
        """
        if self.store.id_exists(employer.id):
            rows = self.store.update_row(employer)
            return SaveStatus(created=False, updated=True, rows_changed=rows)

        self.create(employer)
        return SaveStatus(created=True, updated=False, rows_changed=1)

    # ---------------- Read ----------------
    def get(self, employer_id: Optional[int]) -> Optional[Employer]:
        return self.store.query_by_id(employer_id)

    def find_by(self, field_name: str, value: Any) -> List[Employer]:
        return self.store.query_by_field(field_name, value)

    def list_all(self) -> List[Employer]:
        return self.store.query_all()

    def count(self) -> int:
        return self.store.count()

    # ---------------- Update ----------------
    def update(self, employer: Employer, strict: bool = False) -> int:
        rows = self.store.update_row(employer, strict=strict)
        if rows == 0:
            logger.info(f"Update sem efeito: empregador #{employer.id} não existe")
        return rows

    def update_id(self, employer: Employer, new_id: int) -> int:
        return self.store.update_identity(employer, new_id)

    # ---------------- Delete ----------------
    def delete(self, employer: Optional[Employer]) -> int:
        return self.store.delete_row(employer)

    def delete_many(self, employers: Iterable[Optional[Employer]]) -> int:
        rows = self.store.delete_rows(employers)
        logger.info(f"{rows} empregadores apagados")
        return rows
