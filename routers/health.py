from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session
import structlog

from config import settings
from database import get_db
from schemas.health import HealthResponse

logger = structlog.get_logger()
router = APIRouter()


@router.get("/health",
            response_model=HealthResponse,
            summary="Health Check",
            description="Verifica a saúde da aplicação e do banco")
def health_check(db: Session = Depends(get_db)):
    """
    Endpoint de health check que verifica:
    - Conectividade com o banco (SELECT 1)
    - Timestamp atual
    - Versão da aplicação
    """
    services_status = {}
    overall_status = "healthy"

    try:
        db.execute(text("SELECT 1"))
        services_status["database"] = "connected"
    except Exception as e:
        services_status["database"] = f"error: {str(e)}"
        overall_status = "unhealthy"
        logger.error("Database health check failed", error=str(e))

    health_response = HealthResponse(
        status=overall_status,
        timestamp=datetime.now(timezone.utc),
        version=settings.app_version,
        services=services_status,
    )

    # Define status HTTP baseado na saúde
    status_code = status.HTTP_200_OK if overall_status == "healthy" else status.HTTP_503_SERVICE_UNAVAILABLE

    logger.info("Health check executado", status=overall_status, services=services_status)

    return JSONResponse(
        status_code=status_code,
        content=health_response.model_dump(mode="json"),
    )
