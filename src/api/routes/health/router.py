"""Endpoints de health check (liveness e readiness)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "chargeback-mapper"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "failed"]
    detail: dict[str, Any] | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "detail": self.detail,
            "error": self.error,
        }


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe — pronto apenas com o pipeline construído."""
    pipeline_check = _check_pipeline(getattr(request.app.state, "pipeline", None))
    ready = pipeline_check.status == "ok"

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {"pipeline": pipeline_check.as_dict()},
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_pipeline(pipeline: Any | None) -> DependencyCheck:
    if pipeline is None:
        return DependencyCheck(status="failed", error="not_configured")
    try:
        providers = list(pipeline.registry.keys())
    except Exception as exc:
        logger.warning("readiness_pipeline_check_failed", extra={"error_type": type(exc).__name__})
        return DependencyCheck(status="failed", error=type(exc).__name__)
    return DependencyCheck(
        status="ok",
        detail={"providers": providers, "provider_count": len(providers)},
    )
