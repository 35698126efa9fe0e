from s2i_demo.config.settings import Settings
from s2i_demo.constants.app_constants import APPLICATION_ID, INFO_MESSAGE
from s2i_demo.schemas.info_schema import AppInfoResponse


class InfoController:
    """Controller for application info"""

    def __init__(self, settings: Settings):
        self.settings = settings

    def get_info(self) -> AppInfoResponse:
        return AppInfoResponse(
            message=INFO_MESSAGE,
            application=APPLICATION_ID,
            environment=self.settings.ENVIRONMENT,
        )
