"""Health reporting for the liveness and readiness probes."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from app.schemas.health import HealthStatus, ProbeStatus

logger = logging.getLogger(__name__)

ReadinessCheck = Callable[[], bool]


class HealthReporter:
    """Builds :class:`HealthStatus` payloads for the probe endpoints.

    ``readiness_checks`` are callables returning ``True`` when a downstream
    dependency is reachable. None are registered unless configured, so the
    service reports ready unconditionally by default.
    """

    def __init__(
        self,
        service: str,
        version: str,
        readiness_checks: Sequence[ReadinessCheck] = (),
    ) -> None:
        self.service = service
        self.version = version
        self._readiness_checks = tuple(readiness_checks)

    def _status(self, status: ProbeStatus) -> HealthStatus:
        return HealthStatus(status=status, service=self.service, version=self.version)

    def health(self) -> HealthStatus:
        return self._status("ok")

    def liveness(self) -> HealthStatus:
        return self._status("alive")

    def readiness(self) -> HealthStatus:
        for check in self._readiness_checks:
            try:
                ready = check()
            except Exception as exc:
                logger.warning("Readiness check %s raised: %s", getattr(check, "__qualname__", check), exc)
                ready = False
            if not ready:
                return self._status("unavailable")
        return self._status("ready")
