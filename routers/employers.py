# routers/employers.py
# -*- coding: utf-8 -*-
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_db
from schemas.employers import EmployerOut
from services.employer_repository import EmployerRepository

router = APIRouter(prefix="/employers", tags=["Employers"])


def get_employer_repository(db: Session = Depends(get_db)) -> EmployerRepository:
    return EmployerRepository(db)


# ============================ GET (listar) ============================
@router.get(
    "",
    response_model=List[EmployerOut],
    status_code=status.HTTP_200_OK,
    summary="Listar empregadores",
)
def list_employers(repo: EmployerRepository = Depends(get_employer_repository)):
    """
    Retorna todos os empregadores, ordenados por `id` ascendente.
    Falha do banco vira 503 (ver `register_store_error_handlers`).
    """
    return repo.list_all()
