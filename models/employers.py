# models/employers.py
# -*- coding: utf-8 -*-
from sqlalchemy import Integer, Text, Column
from database import Base


class EmployerRow(Base):
    __tablename__ = "employers"
    # AUTOINCREMENT no SQLite: id apagado nunca é reaproveitado
    __table_args__ = ({"sqlite_autoincrement": True},)

    # o próprio banco atribui o id
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    sector = Column(Text, nullable=True)
    summary = Column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<EmployerRow id={self.id} name={self.name}>"
