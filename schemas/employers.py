# schemas/employers.py
# -*- coding: utf-8 -*-
from typing import Optional
from pydantic import BaseModel, Field


# -------------------- Entidade em memória --------------------
class Employer(BaseModel):
    """
    Registro de empregador usado pelo store e pelo repositório.

    - `id` pode ser preenchido pelo chamador, mas o banco atribui o seu
      próprio na inserção; depois do insert só o id devolvido vale.
    - `name` é NOT NULL no banco. Aqui aceita None de propósito para que a
      violação seja detectada pelo próprio banco. String vazia é válida.
    """
    id: Optional[int] = None
    name: Optional[str] = Field(None, description="Nome do empregador (NOT NULL no banco)")
    sector: Optional[str] = Field(None, description="Setor (opcional, pode repetir)")
    summary: Optional[str] = Field(None, description="Resumo livre (opcional)")

    class Config:
        from_attributes = True


# -------------------- Saída (GET) --------------------
class EmployerOut(BaseModel):
    id: int
    name: str
    sector: Optional[str] = None
    summary: Optional[str] = None

    class Config:
        from_attributes = True
