from typing import Callable

from fastapi import APIRouter, Depends, status

from s2i_demo.config.state import get_clock, get_start_time
from s2i_demo.constants.app_constants import ALL_METHODS
from s2i_demo.routes.any_method_route import AnyMethodRoute
from s2i_demo.controller.health_controller import HealthController
from s2i_demo.schemas.health_schema import HealthResponse, ReadinessResponse

router = APIRouter(route_class=AnyMethodRoute)


def get_health_controller(
    start_time: float = Depends(get_start_time),
    clock: Callable[[], float] = Depends(get_clock),
) -> HealthController:
    return HealthController(start_time, clock=clock)


@router.api_route("/health", methods=ALL_METHODS, response_model=HealthResponse, status_code=status.HTTP_200_OK)
async def health_check(controller: HealthController = Depends(get_health_controller)):
    """
    Liveness probe for container orchestrators

    - **status**: always "healthy"
    - **timestamp**: current UTC time
    - **version**: application version
    - **uptime**: time since start, rounded to the second (e.g. "1m30s")
    """
    return controller.get_health()


@router.api_route("/ready", methods=ALL_METHODS, response_model=ReadinessResponse, status_code=status.HTTP_200_OK)
async def readiness_check(controller: HealthController = Depends(get_health_controller)):
    """
    Readiness probe for load balancers
    """
    return controller.get_readiness()
