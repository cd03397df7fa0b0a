"""
Store de empregadores: mapeia `Employer` <-> linhas da tabela `employers`.

Cada operação roda na sua própria transação sobre a sessão recebida e termina
com commit ou rollback. Falhas do banco saem como erros tipados:
- IntegrityError -> ConstraintViolation
- OperationalError / InterfaceError -> TransportFailure
"""
from collections import Counter
from contextlib import contextmanager
from typing import Any, Iterable, List, Optional

import structlog
from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.orm import Session

from models.employers import EmployerRow
from schemas.employers import Employer
from services.exceptions import ConstraintViolation, EmployerNotFound, TransportFailure

logger = structlog.get_logger()

# Campos aceitos em query_by_field
QUERYABLE_FIELDS = ("id", "name", "sector", "summary")


class EmployerStore:

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _transacao(self, operacao: str):
        """Context manager de transação: commit no fim, rollback + erro tipado na falha"""
        try:
            yield self.db
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("Violação de restrição", operacao=operacao, error=str(e.orig))
            raise ConstraintViolation(str(e.orig)) from e
        except (OperationalError, InterfaceError) as e:
            self.db.rollback()
            logger.error("Erro de acesso ao banco", operacao=operacao, error=str(e.orig))
            raise TransportFailure(str(e.orig)) from e
        except Exception:
            self.db.rollback()
            raise

    @staticmethod
    def _to_entity(row: EmployerRow) -> Employer:
        return Employer.model_validate(row)

    # ---------------- Schema ----------------
    def ensure_schema(self) -> None:
        """Cria a tabela se ainda não existir (idempotente)"""
        try:
            EmployerRow.__table__.create(bind=self.db.get_bind(), checkfirst=True)
        except (OperationalError, InterfaceError) as e:
            logger.error("Erro ao criar tabela", tabela=EmployerRow.__tablename__, error=str(e.orig))
            raise TransportFailure(str(e.orig)) from e
        logger.info("Tabela garantida", tabela=EmployerRow.__tablename__)

    def clear_all(self) -> int:
        """Apaga todas as linhas. Usado para isolar os testes."""
        stmt = delete(EmployerRow).execution_options(synchronize_session=False)
        with self._transacao("clear_all") as db:
            rows = db.execute(stmt).rowcount
        logger.info("Tabela limpa", rows=rows)
        return rows

    # ---------------- Create ----------------
    def insert_row(self, entity: Employer) -> Employer:
        """
        Insere um empregador e grava em `entity.id` o id atribuído pelo banco.
        Um id definido antes pelo chamador é ignorado.
        """
        row = EmployerRow(name=entity.name, sector=entity.sector, summary=entity.summary)
        with self._transacao("insert_row") as db:
            db.add(row)
            db.flush()
            novo_id = row.id

        entity.id = novo_id
        logger.info("Empregador inserido", employer_id=novo_id)
        return entity

    def insert_rows(self, entities: Iterable[Employer]) -> List[Employer]:
        """
        Inserção em lote, tudo ou nada. Nome repetido dentro do lote ou
        nome nulo derrubam o lote inteiro e nenhum id é alterado.
        """
        entities = list(entities)
        if not entities:
            return []

        contagem = Counter(e.name for e in entities if e.name is not None)
        repetidos = sorted(n for n, c in contagem.items() if c > 1)
        if repetidos:
            logger.warning("Nome repetido no lote", nomes=repetidos)
            raise ConstraintViolation(f"Nome repetido no lote: {repetidos}")

        rows = [EmployerRow(name=e.name, sector=e.sector, summary=e.summary) for e in entities]
        with self._transacao("insert_rows") as db:
            db.add_all(rows)
            db.flush()
            ids = [row.id for row in rows]

        for entity, novo_id in zip(entities, ids):
            entity.id = novo_id
        logger.info("Lote inserido", rows=len(ids), employer_ids=ids)
        return entities

    # ---------------- Read ----------------
    def query_by_id(self, employer_id: Optional[int]) -> Optional[Employer]:
        if employer_id is None:
            return None
        stmt = select(EmployerRow).where(EmployerRow.id == employer_id)
        with self._transacao("query_by_id") as db:
            row = db.execute(stmt).scalar_one_or_none()
            return self._to_entity(row) if row is not None else None

    def query_by_field(self, field_name: str, value: Any) -> List[Employer]:
        """Igualdade simples sobre uma coluna; None casa com NULL"""
        if field_name not in QUERYABLE_FIELDS:
            raise ValueError(f"Campo desconhecido: {field_name}")

        coluna = getattr(EmployerRow, field_name)
        criterio = coluna.is_(None) if value is None else coluna == value
        stmt = select(EmployerRow).where(criterio).order_by(EmployerRow.id.asc())
        with self._transacao("query_by_field") as db:
            return [self._to_entity(r) for r in db.execute(stmt).scalars().all()]

    def query_all(self) -> List[Employer]:
        stmt = select(EmployerRow).order_by(EmployerRow.id.asc())
        with self._transacao("query_all") as db:
            return [self._to_entity(r) for r in db.execute(stmt).scalars().all()]

    def count(self) -> int:
        stmt = select(func.count()).select_from(EmployerRow)
        with self._transacao("count") as db:
            return db.execute(stmt).scalar_one()

    def id_exists(self, employer_id: Optional[int]) -> bool:
        if employer_id is None:
            return False
        stmt = select(EmployerRow.id).where(EmployerRow.id == employer_id)
        with self._transacao("id_exists") as db:
            return db.execute(stmt).scalar_one_or_none() is not None

    # ---------------- Update ----------------
    def update_row(self, entity: Employer, strict: bool = False) -> int:
        """
        Sobrescreve name/sector/summary da linha com `entity.id`.
        Retorna quantas linhas mudaram (0 ou 1). Com `strict=True`,
        0 linhas vira EmployerNotFound.
        """
        rows = 0
        if entity.id is not None:
            stmt = (
                update(EmployerRow)
                .where(EmployerRow.id == entity.id)
                .values(name=entity.name, sector=entity.sector, summary=entity.summary)
                .execution_options(synchronize_session=False)
            )
            with self._transacao("update_row") as db:
                rows = db.execute(stmt).rowcount

        if strict and rows == 0:
            raise EmployerNotFound(entity.id)
        if rows:
            logger.info("Empregador atualizado", employer_id=entity.id, rows=rows)
        return rows

    def update_identity(self, entity: Employer, new_id: int) -> int:
        """
        Troca só o id. Se `new_id` já pertence a outra linha o banco recusa
        (ConstraintViolation) e a entidade fica como estava.
        """
        if entity.id is None:
            return 0

        antigo = entity.id
        stmt = (
            update(EmployerRow)
            .where(EmployerRow.id == antigo)
            .values(id=new_id)
            .execution_options(synchronize_session=False)
        )
        with self._transacao("update_identity") as db:
            rows = db.execute(stmt).rowcount

        if rows:
            entity.id = new_id
        logger.info("Id do empregador alterado", old_id=antigo, new_id=new_id, rows=rows)
        return rows

    # ---------------- Delete ----------------
    def delete_row(self, entity: Optional[Employer]) -> int:
        """Apaga estritamente pelo id. Linha inexistente não é erro: retorna 0."""
        if entity is None or entity.id is None:
            return 0
        return self._delete_ids([entity.id])

    def delete_rows(self, entities: Iterable[Optional[Employer]]) -> int:
        ids = [e.id for e in entities if e is not None and e.id is not None]
        if not ids:
            return 0
        return self._delete_ids(ids)

    def _delete_ids(self, ids: List[int]) -> int:
        stmt = (
            delete(EmployerRow)
            .where(EmployerRow.id.in_(ids))
            .execution_options(synchronize_session=False)
        )
        with self._transacao("delete") as db:
            rows = db.execute(stmt).rowcount
        logger.info("Empregadores apagados", employer_ids=ids, rows=rows)
        return rows
