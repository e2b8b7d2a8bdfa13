"""Health check endpoints."""

from fastapi import Depends, Response, status

from app.api.deps import get_health_reporter
from app.schemas.health import HealthStatus
from app.services.health import HealthReporter


def health_check(reporter: HealthReporter = Depends(get_health_reporter)) -> HealthStatus:
    """Returns the health status of the service."""

    return reporter.health()


def liveness_check(reporter: HealthReporter = Depends(get_health_reporter)) -> HealthStatus:
    """Liveness probe: the process is running."""

    return reporter.liveness()


def readiness_check(
    response: Response,
    reporter: HealthReporter = Depends(get_health_reporter),
) -> HealthStatus:
    """Readiness probe: the process can accept traffic."""

    result = reporter.readiness()
    if result.status != "ready":
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return result
