from fastapi import APIRouter, Depends, status

from s2i_demo.config.settings import Settings
from s2i_demo.config.state import get_app_settings
from s2i_demo.constants.app_constants import ALL_METHODS
from s2i_demo.routes.any_method_route import AnyMethodRoute
from s2i_demo.controller.info_controller import InfoController
from s2i_demo.schemas.info_schema import AppInfoResponse

router = APIRouter(route_class=AnyMethodRoute)


def get_info_controller(settings: Settings = Depends(get_app_settings)) -> InfoController:
    return InfoController(settings)


@router.api_route("/info", methods=ALL_METHODS, response_model=AppInfoResponse, status_code=status.HTTP_200_OK)
async def app_info(controller: InfoController = Depends(get_info_controller)):
    """
    Application information

    - **environment**: taken from the ENVIRONMENT variable (default: development)
    """
    return controller.get_info()
