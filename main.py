# main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

import structlog

from config import settings
from database import SessionLocal
from middleware.error_handler import ErrorHandlerMiddleware, register_store_error_handlers
from services.employer_store import EmployerStore

# --- Routers da aplicação ---
from routers import employers, health

# ---------- Logging estruturado ----------
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer(),
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)
logger = structlog.get_logger()


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Consulta de empregadores persistidos.",
        debug=settings.DEBUG,
    )

    # ---------- Criação da tabela ----------
    with SessionLocal() as db:
        EmployerStore(db).ensure_schema()

    # Middlewares
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )
    register_store_error_handlers(app)

    # Health sob /api/v1
    app.include_router(health.router, prefix="/api/v1", tags=["Health"])
    app.include_router(employers.router)

    # Métricas
    Instrumentator().instrument(app).expose(app)

    # Eventos
    @app.on_event("startup")
    async def startup_event():
        logger.info("Iniciando API", version=settings.app_version, base_url=settings.base_url)

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Encerrando API")

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT)
