"""
Health controller that builds liveness and readiness responses.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Callable, Optional

from s2i_demo.constants.app_constants import (
    APP_VERSION,
    CheckStatusEnum,
    HealthStatusEnum,
    ReadinessStatusEnum,
)
from s2i_demo.schemas.health_schema import HealthResponse, ReadinessResponse
from s2i_demo.utils.duration import format_duration

logger = logging.getLogger(__name__)


class HealthController:
    """Controller for health and readiness probes"""

    def __init__(self, start_time: float, clock: Optional[Callable[[], float]] = None):
        self.start_time = start_time
        self.clock = clock or time.monotonic

    def get_uptime(self) -> str:
        """Elapsed time since start, rounded to the second"""
        return format_duration(self.clock() - self.start_time)

    def get_health(self) -> HealthResponse:
        response = HealthResponse(
            status=HealthStatusEnum.HEALTHY.value,
            timestamp=datetime.now(timezone.utc),
            version=APP_VERSION,
            uptime=self.get_uptime(),
        )
        logger.debug("[Health Controller] uptime=%s", response.uptime)
        return response

    def get_readiness(self) -> ReadinessResponse:
        # Only the server itself is checked; there are no backing services
        return ReadinessResponse(
            status=ReadinessStatusEnum.READY.value,
            checks={"server": CheckStatusEnum.OK.value},
        )
