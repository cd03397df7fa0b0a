# -*- coding: utf-8 -*-
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from config import settings

Base = declarative_base()


def build_engine(url: str, echo: bool = False) -> Engine:
    """
    Cria o engine para a URL informada.
    SQLite precisa de check_same_thread=False porque o FastAPI roda rotas
    síncronas em threads do pool.
    """
    connect_args = {}
    if make_url(url).get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=echo, connect_args=connect_args)


engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
